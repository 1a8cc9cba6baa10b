"""Transaction chart renderer.

Pipeline per render: samples -> scale transform -> ``asciichartpy`` plot ->
overlay (marker + tooltip line) -> text block. The plot only depends on the
samples, scale mode and height and is cached on those; hover and pin changes
only redo the overlay.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from chart.autofit import DEFAULT_FONT_PX, AutoFit
from chart.interaction import DEFAULT_CALIBRATION, InteractionState, PointerCalibration, index_at_pointer
from chart.models import (
    DEFAULT_HEIGHT,
    RenderConfig,
    Sample,
    ScaleMode,
    Stats,
    clamp_height,
    compute_stats,
)
from chart.overlay import apply_overlay
from chart.plotter import plot_block
from chart.scale import ScaleTransform

logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading..."


@dataclass(frozen=True)
class ChartFrame:
    text: str
    stats: Optional[Stats] = None
    config: Optional[RenderConfig] = None
    active_index: Optional[int] = None
    loading: bool = False


LOADING_FRAME = ChartFrame(text=LOADING_TEXT, loading=True)


class TransactionChart:
    """Stateful chart model behind a display surface."""

    def __init__(
        self,
        samples: Iterable[Sample] = (),
        scale_mode: ScaleMode = ScaleMode.LOG10,
        height: int = DEFAULT_HEIGHT,
        font_size: float = DEFAULT_FONT_PX,
    ) -> None:
        self.samples: Tuple[Sample, ...] = tuple(samples)
        self.scale_mode = scale_mode
        self.height = clamp_height(height)
        self.interaction = InteractionState()
        self.autofit = AutoFit(font_size)
        self._plot_key: Optional[tuple] = None
        self._plot: Optional[Tuple[str, Stats, RenderConfig]] = None
        self._frame_key: Optional[tuple] = None
        self._frame: ChartFrame = LOADING_FRAME

    # state -------------------------------------------------------------
    @property
    def font_size(self) -> float:
        return self.autofit.font_size

    @property
    def loading(self) -> bool:
        return not self.samples

    def set_samples(self, samples: Iterable[Sample]) -> None:
        self.samples = tuple(samples)
        self.interaction = InteractionState()
        logger.info("Chart received %d samples", len(self.samples))

    def set_scale(self, mode: ScaleMode | str) -> ScaleMode:
        self.scale_mode = ScaleMode(mode)
        return self.scale_mode

    def toggle_scale(self) -> ScaleMode:
        return self.set_scale(self.scale_mode.toggled())

    def set_height(self, height: int) -> int:
        self.height = clamp_height(height)
        return self.height

    # interaction -------------------------------------------------------
    def hover(self, index: Optional[int]) -> bool:
        if index is not None and not 0 <= index < len(self.samples):
            index = None
        return self.interaction.hover(index)

    def hover_at(self, x: float, calibration: PointerCalibration = DEFAULT_CALIBRATION) -> bool:
        """Hover whatever sample lies under pointer ``x`` in pixels."""
        if self.loading:
            return False
        index = index_at_pointer(x, self.render().text, self.font_size, len(self.samples), calibration)
        return self.hover(index)

    def leave(self) -> bool:
        return self.interaction.leave()

    def click(self) -> bool:
        return self.interaction.click()

    # auto-fit ----------------------------------------------------------
    def fit(self, container_width: float, pre_width: float) -> bool:
        """Feed a layout measurement to the auto-fit; ``True`` if the size moved."""
        if self.loading:
            return False
        config = self._base()[2]
        return self.autofit.step(container_width, pre_width, len(self.samples), config.y_axis_width)

    # rendering ---------------------------------------------------------
    def _base(self) -> Tuple[str, Stats, RenderConfig]:
        key = (self.samples, self.scale_mode, self.height)
        if key != self._plot_key or self._plot is None:
            values = [s.tx_count for s in self.samples]
            config = RenderConfig.for_values(values, self.height, self.scale_mode)
            transform = ScaleTransform.build(values, config.scale_mode, config.y_axis_width)
            block = plot_block(transform, config.height)
            self._plot = (block, compute_stats(values), config)
            self._plot_key = key
        return self._plot

    def render(self) -> ChartFrame:
        if self.loading:
            return LOADING_FRAME

        active = self.interaction.active_index
        pinned = self.interaction.is_pinned
        key = (self.samples, self.scale_mode, self.height, active, pinned)
        if key == self._frame_key:
            return self._frame

        block, stats, config = self._base()
        text = apply_overlay(block, self.samples, active, pinned)
        self._frame = ChartFrame(text=text, stats=stats, config=config, active_index=active)
        self._frame_key = key
        logger.debug("Rendered frame (scale=%s height=%d active=%s)", config.scale_mode.value, config.height, active)
        return self._frame
