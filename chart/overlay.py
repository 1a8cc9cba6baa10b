"""Tooltip line and hover marker drawn on top of a plotted chart."""

from __future__ import annotations

from typing import List, Optional, Sequence

from chart.models import Sample
from chart.plotter import AXIS_GLYPH, AXIS_GLYPHS, MARKER_GLYPH, TICK_GLYPH


def find_axis(lines: Sequence[str]) -> Optional[int]:
    """Return the column of the axis baseline glyph, if any row has one."""
    for glyph in (AXIS_GLYPH, TICK_GLYPH):
        for line in lines:
            col = line.find(glyph)
            if col != -1:
                return col
    return None


def _is_curve_cell(ch: str) -> bool:
    # the plot area never contains digits, so anything else drawn is the line
    return ch != " " and ch not in AXIS_GLYPHS and not ch.isdigit() and ch != "."


def inject_marker(lines: Sequence[str], column: int) -> List[str]:
    """Replace the topmost curve cell at ``column`` with the marker glyph."""
    out = list(lines)
    for row, line in enumerate(out):
        if column < len(line) and _is_curve_cell(line[column]):
            out[row] = line[:column] + MARKER_GLYPH + line[column + 1 :]
            break
    return out


def tooltip_text(sample: Sample, pinned: bool = False) -> str:
    text = f"{sample.day} | {sample.tx_count:,} tx"
    if pinned:
        text += " *"
    return text


def tooltip_line(text: str, axis: int, widest: int) -> str:
    """Right-align ``text`` in the plot area without overlapping the labels."""
    inner = " " * max(0, widest - axis - len(text))
    return " " * axis + inner + text


def block_width(lines: Sequence[str], samples: Sequence[Sample], axis: Optional[int]) -> int:
    """Width every row is padded to.

    Wide enough for the longest tooltip any sample can produce, so the block
    keeps the same size whether or not a tooltip is showing.
    """
    widest = max((len(line) for line in lines), default=0)
    if axis is None or not samples:
        return widest
    longest = max(len(tooltip_text(s, pinned=True)) for s in samples)
    return max(widest, axis + longest)


def apply_overlay(
    block: str,
    samples: Sequence[Sample],
    active_index: Optional[int],
    pinned: bool = False,
) -> str:
    """Return ``block`` with the summary line on top and the marker drawn in.

    Out-of-range indices behave as if nothing were active: no marker and a
    blank summary line as wide as the widest chart row.
    """
    lines = block.split("\n")
    axis = find_axis(lines)
    widest = block_width(lines, samples, axis)
    lines = [line.ljust(widest) for line in lines]

    if active_index is None or not 0 <= active_index < len(samples) or axis is None:
        return "\n".join([" " * widest] + lines)

    lines = inject_marker(lines, axis + 1 + active_index)
    summary = tooltip_line(tooltip_text(samples[active_index], pinned), axis, widest)
    return "\n".join([summary] + lines)
