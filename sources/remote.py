"""Fetch a transaction dataset over HTTP."""

from __future__ import annotations

import asyncio
import logging
from typing import List

import aiohttp
from pydantic import ValidationError

from chart.models import Sample
from sources import DataSourceError, parse_samples

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0


async def fetch_samples(url: str, timeout: float = DEFAULT_TIMEOUT_SEC) -> List[Sample]:
    """Return the samples served as JSON at ``url``."""
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        try:
            logger.info("Fetching dataset from %s", url)
            async with session.get(url, headers={"Accept": "application/json"}) as resp:
                resp.raise_for_status()
                payload = await resp.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
            logger.error("Failed to fetch dataset %s: %s", url, exc)
            raise DataSourceError(f"cannot fetch dataset from {url}") from exc

    try:
        samples = parse_samples(payload)
    except ValidationError as exc:
        logger.error("Dataset at %s has malformed samples: %s", url, exc)
        raise DataSourceError(f"malformed dataset at {url}") from exc
    logger.info("Fetched %d samples from %s", len(samples), url)
    return samples
