"""Adapter around the ``asciichartpy`` line plotter."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

import asciichartpy

from chart.scale import ScaleTransform

logger = logging.getLogger(__name__)

AXIS_GLYPH = "┼"
TICK_GLYPH = "┤"
MARKER_GLYPH = "●"
AXIS_GLYPHS = (AXIS_GLYPH, TICK_GLYPH)


def _with_terminal_segment(values: List[float]) -> List[float]:
    # Column i holds the segment i -> i+1; repeat the last value so the final
    # sample is drawn as a flat stub instead of an empty column.
    return values + values[-1:]


def plot_block(transform: ScaleTransform, height: int) -> str:
    """Return the multi-line chart for ``transform`` at ``height`` rows."""
    cfg: Dict[str, Any] = {"height": height, "format": transform.label_format}
    if transform.minimum is not None:
        cfg["min"] = transform.minimum
    series = _with_terminal_segment(list(transform.plot_values))
    logger.debug("Plotting %d values (%s)", len(transform.plot_values), transform.label_format)
    lines = asciichartpy.plot(series, cfg).split("\n")
    # asciichartpy strips trailing blanks; downstream stages expect uniform rows
    widest = max(len(line) for line in lines)
    return "\n".join(line.ljust(widest) for line in lines)
