#!/usr/bin/env python
"""Interactive terminal transaction chart service."""

from __future__ import annotations

import argparse
import asyncio
import functools
import logging
import sys
from typing import List, Optional

from chart.autofit import measure_text_width
from chart.models import Sample, ScaleMode
from chart.renderer import TransactionChart
from sources import DataSourceError
from sources.remote import fetch_samples
from sources.static import DEFAULT_DATASET, load_dataset
from sources.synthetic import generate_random_data
from ui import constants
from ui.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="txchart", description="ASCII transaction chart")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--data", default=constants.CHART_DATA, help="JSON dataset path (default: bundled dataset).")
    src.add_argument("--url", default=constants.CHART_URL, help="Fetch the JSON dataset from this URL.")
    src.add_argument(
        "--random",
        type=int,
        nargs="?",
        const=constants.RANDOM_DAYS,
        default=None,
        metavar="DAYS",
        help="Use synthetic data for DAYS days.",
    )
    p.add_argument("--height", type=int, default=constants.CHART_HEIGHT, help="Plot height in rows (10-50).")
    p.add_argument(
        "--scale",
        default=constants.CHART_SCALE,
        help="Initial scale: log10 or linear (default: CHART_SCALE env var or log10).",
    )
    p.add_argument("--linear", action="store_true", help="Shorthand for --scale linear.")
    p.add_argument("--print", dest="headless", action="store_true", help="Print one chart and exit.")
    p.add_argument("--width-px", type=float, default=800.0, help="Container width for --print.")
    p.add_argument("--hover", type=int, default=None, help="Hover this sample index in --print mode.")
    p.add_argument("--pin", type=int, default=None, help="Pin this sample index in --print mode.")
    return p


def _scale_from(parser: argparse.ArgumentParser, args: argparse.Namespace) -> ScaleMode:
    if args.linear:
        return ScaleMode.LINEAR
    try:
        return ScaleMode(args.scale)
    except ValueError:
        choices = ", ".join(m.value for m in ScaleMode)
        parser.error(f"invalid scale {args.scale!r} (choose from {choices})")


async def _load(args: argparse.Namespace) -> List[Sample]:
    if args.random is not None:
        return generate_random_data(args.random)
    if args.url:
        return await fetch_samples(args.url)
    return load_dataset(args.data or DEFAULT_DATASET)


def render_once(
    samples: List[Sample],
    *,
    scale_mode: ScaleMode,
    height: int,
    width_px: float,
    hover: Optional[int] = None,
    pin: Optional[int] = None,
) -> str:
    """Render a fitted chart with its font size and stats as plain text."""
    chart = TransactionChart(samples, scale_mode=scale_mode, height=height)
    frame = chart.render()
    if frame.loading:
        return frame.text

    # no layout exists before the first measurement
    chart.fit(width_px, 0)
    chart.autofit.converge(
        width_px,
        lambda size: measure_text_width(chart.render().text, size),
        len(samples),
        frame.config.y_axis_width,
    )

    if pin is not None:
        chart.hover(pin)
        chart.click()
    chart.hover(hover)
    frame = chart.render()

    s = frame.stats
    lines = [
        frame.text,
        "",
        f"font: {chart.font_size:g}px ({chart.autofit.state.value}, container {width_px:g}px)",
        f"min {s.min:,}  avg {s.avg:,}  max {s.max:,}  total {s.total:,}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    scale_mode = _scale_from(parser, args)

    if args.headless:
        setup_logging()
        try:
            samples = asyncio.run(_load(args))
        except DataSourceError as exc:
            print(f"txchart: error: {exc}", file=sys.stderr)
            return 1
        print(
            render_once(
                samples,
                scale_mode=scale_mode,
                height=args.height,
                width_px=args.width_px,
                hover=args.hover,
                pin=args.pin,
            )
        )
        return 0

    setup_logging(filename=constants.LOG_FILE)
    from ui.chart_app import ChartApp

    if args.random is not None:
        days = args.random

        async def source() -> List[Sample]:
            return generate_random_data(days)

    elif args.url:
        source = functools.partial(fetch_samples, args.url)
    else:
        path = args.data or DEFAULT_DATASET

        async def source() -> List[Sample]:
            return load_dataset(path)

    ChartApp(source, height=args.height, scale_mode=scale_mode).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
