"""Data model shared by the chart renderer and its data sources."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from pydantic import BaseModel, ConfigDict, Field

MIN_HEIGHT = 10
MAX_HEIGHT = 50
DEFAULT_HEIGHT = 25
MIN_Y_AXIS_WIDTH = 7


class Sample(BaseModel):
    """Transaction count for a single calendar day."""

    model_config = ConfigDict(frozen=True)

    day: str
    tx_count: int = Field(ge=0)


class ScaleMode(str, Enum):
    LINEAR = "linear"
    LOG10 = "log10"

    def toggled(self) -> "ScaleMode":
        return ScaleMode.LINEAR if self is ScaleMode.LOG10 else ScaleMode.LOG10


def round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round`` (ties go towards +inf)."""
    return int(math.floor(value + 0.5))


def round1(value: float) -> float:
    """Round ``value`` to one decimal place, ties upwards."""
    return math.floor(value * 10 + 0.5) / 10


def y_axis_width(max_value: int) -> int:
    """Label width wide enough that the largest label never truncates."""
    return max(MIN_Y_AXIS_WIDTH, len(str(max_value)) + 2)


def clamp_height(height: int) -> int:
    return max(MIN_HEIGHT, min(MAX_HEIGHT, int(height)))


@dataclass(frozen=True)
class RenderConfig:
    height: int
    scale_mode: ScaleMode
    y_axis_width: int = MIN_Y_AXIS_WIDTH

    def __post_init__(self) -> None:
        if self.height < 1:
            raise ValueError("height must be >= 1")
        if self.y_axis_width < MIN_Y_AXIS_WIDTH:
            raise ValueError(f"y_axis_width must be >= {MIN_Y_AXIS_WIDTH}")

    @classmethod
    def for_values(cls, values: Sequence[int], height: int, scale_mode: ScaleMode) -> "RenderConfig":
        return cls(height=height, scale_mode=scale_mode, y_axis_width=y_axis_width(max(values)))


@dataclass(frozen=True)
class Stats:
    min: int
    max: int
    avg: int
    total: int


def compute_stats(values: Sequence[int]) -> Stats:
    """Return min/max/avg/total for a non-empty sequence of counts."""
    if not values:
        raise ValueError("cannot compute stats of an empty sequence")
    total = sum(values)
    return Stats(
        min=min(values),
        max=max(values),
        avg=round_half_up(total / len(values)),
        total=total,
    )
