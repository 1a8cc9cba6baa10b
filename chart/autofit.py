"""Pick a font size so the rendered chart fills its container without scrolling.

The fit is a damped fixed-point iteration. Each call to :func:`fit_step`
compares the natural width of the rendered block with the container width
and nudges the font size towards it; the 0.96 safety factor keeps the next
measurement inside the tolerance band instead of bouncing between shrink
and grow. Sizes are clamped to ``[6, 24]`` px and a fit stuck at a clamp is
accepted as is.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from chart.models import round1

logger = logging.getLogger(__name__)

CHAR_WIDTH_RATIO = 0.6
MIN_FONT_PX = 6.0
MAX_FONT_PX = 24.0
DEFAULT_FONT_PX = 8.0
OVERFLOW_RATIO = 1.02
UNDERFILL_RATIO = 0.9
SAFETY_FACTOR = 0.96
HYSTERESIS_PX = 0.5
# axis gutter chars beyond the label itself, used before anything is measured
AXIS_GUTTER_CHARS = 4


class FitState(str, Enum):
    UNMEASURED = "unmeasured"
    CONVERGING = "converging"
    CONVERGED = "converged"


@dataclass
class ViewportState:
    font_size: float = DEFAULT_FONT_PX
    container_width: float = 0.0
    rendered_width: float = 0.0

    def is_converged(self) -> bool:
        if self.container_width <= 0:
            return False
        low = self.container_width * UNDERFILL_RATIO
        high = self.container_width * OVERFLOW_RATIO
        return low <= self.rendered_width <= high


def measure_text_width(text: str, font_size: float) -> float:
    """Pixel width of ``text`` on a monospace surface at ``font_size``."""
    widest = max((len(line) for line in text.split("\n")), default=0)
    return widest * font_size * CHAR_WIDTH_RATIO


def estimate_font_size(container_width: float, sample_count: int, y_axis_width: int) -> float:
    chars = y_axis_width + AXIS_GUTTER_CHARS + sample_count
    estimate = round1(container_width / (chars * CHAR_WIDTH_RATIO))
    return max(MIN_FONT_PX, min(MAX_FONT_PX, estimate))


def fit_step(
    font_size: float,
    container_width: float,
    pre_width: float,
    sample_count: int,
    y_axis_width: int,
) -> Optional[float]:
    """Return the next font size, or ``None`` when the current one stays."""
    if container_width <= 0 or sample_count <= 0:
        return None

    if pre_width <= 0:
        estimate = estimate_font_size(container_width, sample_count, y_axis_width)
        if abs(estimate - font_size) > HYSTERESIS_PX:
            return estimate
        return None

    if pre_width > container_width * OVERFLOW_RATIO:
        shrunk = round1(font_size * (container_width / pre_width) * SAFETY_FACTOR)
        if shrunk >= MIN_FONT_PX and shrunk != font_size:
            return shrunk
        return None

    if pre_width < container_width * UNDERFILL_RATIO and font_size < MAX_FONT_PX:
        grown = round1(min(font_size * (container_width * SAFETY_FACTOR / pre_width), MAX_FONT_PX))
        if grown != font_size:
            return grown
        return None

    return None


class AutoFit:
    """Single writer of the chart font size.

    States move ``UNMEASURED -> CONVERGING -> CONVERGED`` as layout
    measurements arrive; any step that changes the size goes back to
    ``CONVERGING`` until a step leaves it untouched.
    """

    def __init__(self, font_size: float = DEFAULT_FONT_PX) -> None:
        self.viewport = ViewportState(font_size=max(MIN_FONT_PX, min(MAX_FONT_PX, font_size)))
        self.state = FitState.UNMEASURED

    @property
    def font_size(self) -> float:
        return self.viewport.font_size

    def step(self, container_width: float, pre_width: float, sample_count: int, y_axis_width: int) -> bool:
        """Run one fit step; return ``True`` when the font size changed."""
        self.viewport.container_width = container_width
        self.viewport.rendered_width = pre_width
        new_size = fit_step(self.font_size, container_width, pre_width, sample_count, y_axis_width)

        if new_size is None:
            self.state = FitState.UNMEASURED if pre_width <= 0 else FitState.CONVERGED
            return False

        logger.debug(
            "Font size %.1f -> %.1f (container=%.0fpx rendered=%.0fpx)",
            self.font_size,
            new_size,
            container_width,
            pre_width,
        )
        self.viewport.font_size = new_size
        self.state = FitState.CONVERGING
        return True

    def converge(
        self,
        container_width: float,
        measure: Callable[[float], float],
        sample_count: int,
        y_axis_width: int,
        max_steps: int = 16,
    ) -> int:
        """Step with fresh measurements until the size settles.

        ``measure`` receives the current font size and returns the rendered
        width in pixels. Returns the number of size changes applied.
        """
        changes = 0
        for _ in range(max_steps):
            if not self.step(container_width, measure(self.font_size), sample_count, y_axis_width):
                break
            changes += 1
        return changes
