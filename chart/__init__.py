from chart.autofit import AutoFit, FitState, ViewportState, fit_step, measure_text_width
from chart.debounce import Debouncer
from chart.interaction import (
    DEFAULT_CALIBRATION,
    TERMINAL_CALIBRATION,
    InteractionState,
    PointerCalibration,
    index_at_pointer,
)
from chart.models import RenderConfig, Sample, ScaleMode, Stats, compute_stats, y_axis_width
from chart.overlay import apply_overlay
from chart.renderer import LOADING_TEXT, ChartFrame, TransactionChart
from chart.scale import AxisLabelFormat, ScaleTransform

__all__ = [
    "AutoFit",
    "AxisLabelFormat",
    "ChartFrame",
    "DEFAULT_CALIBRATION",
    "Debouncer",
    "FitState",
    "InteractionState",
    "LOADING_TEXT",
    "PointerCalibration",
    "RenderConfig",
    "Sample",
    "ScaleMode",
    "ScaleTransform",
    "Stats",
    "TERMINAL_CALIBRATION",
    "TransactionChart",
    "ViewportState",
    "apply_overlay",
    "compute_stats",
    "fit_step",
    "index_at_pointer",
    "measure_text_width",
    "y_axis_width",
]
