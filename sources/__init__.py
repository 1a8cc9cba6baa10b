"""Data sources feeding the transaction chart."""

from __future__ import annotations

from typing import Any, List

from chart.models import Sample

DATASET_KEY = "transaction_count"


class DataSourceError(RuntimeError):
    """Raised when a dataset cannot be fetched or decoded."""


def parse_samples(payload: Any) -> List[Sample]:
    """Validate ``payload`` into samples.

    Accepts either ``{"transaction_count": [...]}`` or a bare list of
    ``{"day": ..., "tx_count": ...}`` records. Raises
    ``pydantic.ValidationError`` for malformed records.
    """
    if isinstance(payload, dict):
        if DATASET_KEY not in payload:
            raise DataSourceError(f"dataset has no {DATASET_KEY!r} key")
        payload = payload[DATASET_KEY]
    if not isinstance(payload, list):
        raise DataSourceError(f"expected a list of samples, got {type(payload).__name__}")
    return [Sample.model_validate(item) for item in payload]
