"""Map raw transaction counts to plot space and back for axis labels.

Transaction data is spiky: a single burst can sit orders of magnitude above
the baseline. In ``log10`` mode values are plotted as ``log10(v + 1)`` so
quiet days keep visible height, while the axis labels are inverted back to
real counts.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from chart.models import ScaleMode, round_half_up


def to_plot_values(values: Sequence[int], mode: ScaleMode) -> List[float]:
    if mode is ScaleMode.LOG10:
        return [math.log10(v + 1) for v in values]
    return [float(v) for v in values]


def from_plot_value(y: float, mode: ScaleMode) -> int:
    """Invert a plot-space value to the count shown on the axis."""
    if mode is ScaleMode.LOG10:
        return max(0, round_half_up(10**y - 1))
    return round_half_up(y)


class AxisLabelFormat:
    """Fixed-width axis label formatter.

    ``asciichartpy`` calls ``cfg["format"].format(y)`` for every axis row,
    the same hook a ``str.format`` template would fill.
    """

    def __init__(self, mode: ScaleMode, width: int) -> None:
        self.mode = mode
        self.width = width

    def format(self, y: float) -> str:
        return str(from_plot_value(y, self.mode)).rjust(self.width)

    def __repr__(self) -> str:
        return f"AxisLabelFormat(mode={self.mode.value!r}, width={self.width})"


@dataclass(frozen=True)
class ScaleTransform:
    plot_values: List[float]
    label_format: AxisLabelFormat
    minimum: Optional[float] = None

    @classmethod
    def build(cls, values: Sequence[int], mode: ScaleMode, width: int) -> "ScaleTransform":
        # log10(0 + 1) == 0, so pinning the floor keeps the baseline at zero counts
        minimum = 0.0 if mode is ScaleMode.LOG10 else None
        return cls(
            plot_values=to_plot_values(values, mode),
            label_format=AxisLabelFormat(mode, width),
            minimum=minimum,
        )
