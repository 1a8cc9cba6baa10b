import asyncio
import contextlib
import logging
from typing import Awaitable, Callable, List, Optional

from textual.app import App, ComposeResult
from textual.timer import Timer
from textual.widgets import Footer, Static

from chart.models import Sample, ScaleMode
from chart.renderer import TransactionChart
from sources import DataSourceError
from sources.synthetic import generate_random_data
from ui.chart_widget import TransactionChartView
from ui.constants import CELL_WIDTH_PX, CHART_HEIGHT, COPY_STATUS_SEC, RANDOM_DAYS

logger = logging.getLogger(__name__)

SampleSource = Callable[[], Awaitable[List[Sample]]]


class ChartApp(App):
    """Transaction chart in the terminal with hover, pin and copy."""

    CSS = """
    #controls {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }
    #chart-box {
        height: auto;
        padding: 1 0;
    }
    """

    BINDINGS = [
        ("l", "toggle_scale", "log10/linear"),
        ("c", "copy", "Copy"),
        ("plus", "taller", "Taller"),
        ("minus", "shorter", "Shorter"),
        ("r", "toggle_source", "Real/Random"),
        ("g", "regenerate", "Regenerate"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        source: SampleSource,
        height: int = CHART_HEIGHT,
        scale_mode: ScaleMode = ScaleMode.LOG10,
        random_days: int = RANDOM_DAYS,
        cell_width_px: float = CELL_WIDTH_PX,
    ) -> None:
        super().__init__()
        self.source = source
        self.random_days = random_days
        self.cell_width_px = cell_width_px
        self.chart = TransactionChart(scale_mode=scale_mode, height=height)
        self.use_random = False
        self.copied = False
        self.controls_text = ""
        self.loader: asyncio.Task | None = None
        self._copy_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        yield Static("", id="controls", markup=False)
        yield TransactionChartView(self.chart, cell_width_px=self.cell_width_px, id="chart-box")
        yield Footer()

    @property
    def view(self) -> TransactionChartView:
        return self.query_one(TransactionChartView)

    async def on_mount(self) -> None:
        logger.info("Chart UI mounted")
        self.update_controls()
        self.start_loader()

    async def on_unmount(self) -> None:
        if self.loader:
            self.loader.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self.loader
        logger.info("Chart UI shutting down")

    # data --------------------------------------------------------------
    def start_loader(self) -> None:
        self.cancel_loader()
        self.loader = asyncio.create_task(self.load_real())

    def cancel_loader(self) -> None:
        if self.loader is not None and not self.loader.done():
            logger.debug("Cancelling pending data load")
            self.loader.cancel()

    async def load_real(self) -> None:
        try:
            samples = await self.source()
        except DataSourceError as exc:
            logger.warning("Data source failed, staying in loading state: %s", exc)
            samples = []
        if not self.use_random:
            self.show_samples(samples)

    def show_samples(self, samples: List[Sample]) -> None:
        self.chart.set_samples(samples)
        self.view.refresh_chart()
        self.update_controls()

    # controls ----------------------------------------------------------
    def update_controls(self) -> None:
        frame = self.chart.render()
        parts = [
            f"[{self.chart.scale_mode.value}]",
            "[✓ copied]" if self.copied else "[copy]",
            f"height: {self.chart.height}",
            f"font: {self.chart.font_size:g}px (auto)",
            f"width: {self.view.container_width_px:.0f}px",
            "source: random" if self.use_random else "source: real",
        ]
        hidden = self.view.hidden_columns
        if hidden:
            parts.append(f"cropped: {hidden} cols hidden")
        if frame.stats is not None:
            s = frame.stats
            parts.append(f"min {s.min:,}  avg {s.avg:,}  max {s.max:,}  total {s.total:,}")
        self.controls_text = "  ".join(parts)
        self.query_one("#controls", Static).update(self.controls_text)

    def on_transaction_chart_view_fitted(self, message: TransactionChartView.Fitted) -> None:
        self.update_controls()

    def redraw(self) -> None:
        self.view.refresh_chart()
        self.update_controls()

    def action_toggle_scale(self) -> None:
        mode = self.chart.toggle_scale()
        logger.info("Scale switched to %s", mode.value)
        self.redraw()

    def action_taller(self) -> None:
        self.chart.set_height(self.chart.height + 1)
        self.redraw()

    def action_shorter(self) -> None:
        self.chart.set_height(self.chart.height - 1)
        self.redraw()

    def action_toggle_source(self) -> None:
        self.use_random = not self.use_random
        if self.use_random:
            self.cancel_loader()
            self.show_samples(generate_random_data(self.random_days))
        else:
            self.chart.set_samples([])
            self.redraw()
            self.start_loader()

    def action_regenerate(self) -> None:
        if self.use_random:
            self.show_samples(generate_random_data(self.random_days))

    def action_copy(self) -> None:
        frame = self.chart.render()
        if frame.loading:
            return
        try:
            self.copy_to_clipboard(frame.text)
        except Exception:
            logger.exception("Failed to copy chart to clipboard")
            return
        self.copied = True
        self.update_controls()
        if self._copy_timer is not None:
            self._copy_timer.stop()
        self._copy_timer = self.set_timer(COPY_STATUS_SEC, self._clear_copied)

    def _clear_copied(self) -> None:
        self.copied = False
        self._copy_timer = None
        self.update_controls()
