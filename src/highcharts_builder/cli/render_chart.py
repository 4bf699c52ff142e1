"""CLI: render a chart from an options file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from highcharts_builder.config.options_file import load_options
from highcharts_builder.core.constants import ChartType, JsEngine
from highcharts_builder.core.errors import HighchartsError
from highcharts_builder.viz.highchart import Highchart

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="highcharts_builder render",
        description="Render Highcharts constructor JavaScript (or a full page) from a YAML/JSON options file.",
    )
    p.add_argument(
        "--options",
        required=True,
        help="Path to the options file (mapping of root option names). YAML tag !js marks raw JavaScript.",
    )
    p.add_argument(
        "--type",
        default=ChartType.HIGHCHART.value,
        choices=[t.value for t in ChartType],
        help="Chart variant. Default: highchart",
    )
    p.add_argument(
        "--engine",
        default=JsEngine.JQUERY.value,
        choices=[e.value for e in JsEngine],
        help="JavaScript framework profile. Default: jquery",
    )
    p.add_argument("--var", default=None, help="Assign the chart to this JavaScript variable.")
    p.add_argument("--callback", default=None, help="JavaScript callback passed to the constructor.")
    p.add_argument("--script-tag", action="store_true", help="Wrap the output in a <script> tag.")
    p.add_argument("--html", action="store_true", help="Emit a complete HTML page instead.")
    p.add_argument("--dark", action="store_true", help="Apply the built-in dark theme (with --html).")
    p.add_argument("--out", default=None, help="Write to this file instead of stdout.")
    return p


def build_chart(args: argparse.Namespace) -> Highchart:
    chart = Highchart(chart_type=args.type, js_engine=args.engine)
    for name, value in load_options(args.options).items():
        chart[name] = value
    if args.dark:
        chart.set_use_dark_theme()
    return chart


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        chart = build_chart(args)
        if args.html:
            output = chart.get_html()
        else:
            output = chart.render(args.var, args.callback, args.script_tag)
    except HighchartsError as exc:
        logger.error("Failed to render chart: %s", exc)
        return 1

    if args.out:
        Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        Path(args.out).write_text(output, encoding="utf-8")
        logger.info("Wrote %s", args.out)
    else:
        print(output)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
