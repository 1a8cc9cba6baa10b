"""Textual widget that displays a :class:`TransactionChart` and feeds it input."""

from __future__ import annotations

import logging
from typing import Optional

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static

from chart.autofit import CHAR_WIDTH_RATIO, measure_text_width
from chart.debounce import INITIAL_FIT_DELAY_SEC, RESIZE_DEBOUNCE_SEC, Debouncer
from chart.interaction import TERMINAL_CALIBRATION
from chart.renderer import ChartFrame, TransactionChart
from ui.constants import CELL_WIDTH_PX

logger = logging.getLogger(__name__)


class TransactionChartView(Static):
    """Chart display surface.

    The terminal reports its width in cells; it is treated as a monospace
    surface ``cell_width_px`` wide per cell, and the chart text as laid out
    at the auto-fitted font size on that surface.
    """

    DEFAULT_CSS = """
    TransactionChartView {
        width: 100%;
        height: auto;
        overflow-x: hidden;
    }
    """

    class Fitted(Message):
        """Posted after each auto-fit measurement."""

        def __init__(self, font_size: float, changed: bool) -> None:
            super().__init__()
            self.font_size = font_size
            self.changed = changed

    def __init__(self, chart: TransactionChart, cell_width_px: float = CELL_WIDTH_PX, **kwargs) -> None:
        super().__init__("", markup=False, **kwargs)
        self.chart = chart
        self.cell_width_px = cell_width_px
        self.shown: Optional[ChartFrame] = None
        self.resize_debounce = Debouncer(RESIZE_DEBOUNCE_SEC, self.refit)
        self.initial_fit = Debouncer(INITIAL_FIT_DELAY_SEC, self.refit)

    # geometry ----------------------------------------------------------
    @property
    def container_width_px(self) -> float:
        return self.content_size.width * self.cell_width_px

    @property
    def char_width_px(self) -> float:
        return self.chart.font_size * CHAR_WIDTH_RATIO

    def measure_width_px(self) -> float:
        """Natural width of the text currently shown; 0 before the first chart paint."""
        if self.shown is None or self.shown.loading:
            return 0.0
        return measure_text_width(self.shown.text, self.chart.font_size)

    @property
    def hidden_columns(self) -> int:
        """Chart columns cut off by the right edge; the terminal draws one char per cell."""
        if self.shown is None or self.shown.loading:
            return 0
        widest = max(len(line) for line in self.shown.text.split("\n"))
        return max(0, widest - self.content_size.width)

    # rendering ---------------------------------------------------------
    def refresh_chart(self, refit: bool = True) -> None:
        frame = self.chart.render()
        if frame is self.shown:
            return
        self.shown = frame
        self.update(Text(frame.text, no_wrap=True, overflow="crop"))
        if refit and not frame.loading:
            self.call_after_refresh(self.refit)

    def refit(self) -> None:
        if self.chart.loading or self.content_size.width == 0:
            return
        changed = self.chart.fit(self.container_width_px, self.measure_width_px())
        self.post_message(self.Fitted(self.chart.font_size, changed))
        if changed:
            logger.debug("Auto-fit moved font size to %.1fpx", self.chart.font_size)
            # measure again once the new size has been laid out
            self.call_after_refresh(self.refit)

    # events ------------------------------------------------------------
    def on_mount(self) -> None:
        self.refresh_chart()
        self.initial_fit.trigger()

    def on_unmount(self) -> None:
        self.resize_debounce.cancel()
        self.initial_fit.cancel()

    def on_resize(self, event: events.Resize) -> None:
        self.resize_debounce.trigger()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            changed = self.chart.leave()
        else:
            # pointer at the centre of the hovered cell
            x = (offset.x + 0.5) * self.char_width_px
            changed = self.chart.hover_at(x, TERMINAL_CALIBRATION)
        if changed:
            self.refresh_chart(refit=False)

    def on_leave(self, event: events.Leave) -> None:
        if self.chart.leave():
            self.refresh_chart(refit=False)

    def on_click(self, event: events.Click) -> None:
        if self.chart.click():
            self.refresh_chart(refit=False)
