"""Hover / pin state and pointer-to-sample mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from chart.overlay import find_axis


@dataclass
class InteractionState:
    """Hovered and pinned sample indices; a pin wins over a hover."""

    hovered_index: Optional[int] = None
    pinned_index: Optional[int] = None

    @property
    def active_index(self) -> Optional[int]:
        if self.pinned_index is not None:
            return self.pinned_index
        return self.hovered_index

    @property
    def is_pinned(self) -> bool:
        return self.pinned_index is not None

    def hover(self, index: Optional[int]) -> bool:
        changed = index != self.hovered_index
        self.hovered_index = index
        return changed

    def leave(self) -> bool:
        return self.hover(None)

    def click(self) -> bool:
        """Toggle the pin on the hovered sample; with no hover, clear it."""
        before = self.pinned_index
        if self.hovered_index is None or self.pinned_index == self.hovered_index:
            self.pinned_index = None
        else:
            self.pinned_index = self.hovered_index
        return before != self.pinned_index


@dataclass(frozen=True)
class PointerCalibration:
    """Monospace metrics of the surface the chart is drawn on.

    ``char_width_ratio`` is glyph width over font size and
    ``left_margin_ratio`` the gutter left of the plot area, also in font
    sizes. Both are approximations tuned per surface.
    """

    char_width_ratio: float = 0.6
    left_margin_ratio: float = 1.5


DEFAULT_CALIBRATION = PointerCalibration()
# a terminal cell is exactly one text column and the block starts at x=0
TERMINAL_CALIBRATION = PointerCalibration(left_margin_ratio=0.0)


def index_at_pointer(
    x: float,
    block: str,
    font_size: float,
    sample_count: int,
    calibration: PointerCalibration = DEFAULT_CALIBRATION,
) -> Optional[int]:
    """Sample index under pointer ``x`` (pixels from the block's left edge)."""
    axis = find_axis(block.split("\n"))
    if axis is None or font_size <= 0:
        return None
    char_width = font_size * calibration.char_width_ratio
    origin = (axis + 1) * char_width + font_size * calibration.left_margin_ratio
    index = int(math.floor((x - origin) / char_width))
    if 0 <= index < sample_count:
        return index
    return None
