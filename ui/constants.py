"""Environment-driven settings for the chart UI."""

import os

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL = os.environ.get("LOG_LEVEL", DEFAULT_LOG_LEVEL)
# the TUI owns the terminal, so logs go to a file
LOG_FILE = os.environ.get("CHART_LOG", "txchart_ui.log")

CHART_DATA = os.environ.get("CHART_DATA")
CHART_URL = os.environ.get("CHART_URL")
CHART_HEIGHT = int(os.environ.get("CHART_HEIGHT", "25"))
CHART_SCALE = os.environ.get("CHART_SCALE", "log10")
RANDOM_DAYS = int(os.environ.get("CHART_RANDOM_DAYS", "100"))

# pixel width of one terminal cell; 0.6 x a 14px terminal font
CELL_WIDTH_PX = float(os.environ.get("CHART_CELL_PX", "8.4"))

COPY_STATUS_SEC = 2.0
