"""Static JSON dataset shipped with the chart."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from chart.models import Sample
from sources import DataSourceError, parse_samples

logger = logging.getLogger(__name__)

DEFAULT_DATASET = Path(__file__).resolve().parent / "data" / "chartstats.json"


def load_dataset(path: str | Path = DEFAULT_DATASET) -> List[Sample]:
    """Load samples from ``path``.

    Malformed records are logged and yield an empty list so the chart stays
    in its loading state; a missing or unreadable file raises
    :class:`DataSourceError`.
    """
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read dataset %s: %s", path, exc)
        raise DataSourceError(f"cannot read dataset {path}") from exc

    try:
        samples = parse_samples(payload)
    except ValidationError as exc:
        logger.warning("Dataset %s has malformed samples: %s", path, exc)
        return []
    logger.info("Loaded %d samples from %s", len(samples), path)
    return samples
