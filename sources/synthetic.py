"""Random spiky transaction data for demos."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import List, Optional

from chart.models import Sample, round_half_up

DEFAULT_DAYS = 100
BASE_MAX = 200
SPIKE_MAX = 8000
SPIKE_PROBABILITY = 0.1


def generate_random_data(
    days: int = DEFAULT_DAYS,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> List[Sample]:
    """Return ``days`` consecutive samples ending ``today``.

    Each day gets a baseline in ``[0, 200)`` and, one day in ten, a burst of
    up to 8000 extra transactions.
    """
    rng = rng or random.Random()
    today = today or date.today()
    samples: List[Sample] = []
    for i in range(days):
        day = today - timedelta(days=days - i - 1)
        base = rng.random() * BASE_MAX
        spike = rng.random() * SPIKE_MAX if rng.random() > 1 - SPIKE_PROBABILITY else 0.0
        samples.append(Sample(day=day.isoformat(), tx_count=round_half_up(base + spike)))
    return samples
