"""CLI: list the script URLs a chart page needs."""

from __future__ import annotations

import argparse
import logging
import sys

from highcharts_builder.core.constants import ChartType, JsEngine
from highcharts_builder.core.errors import HighchartsError
from highcharts_builder.viz.highchart import Highchart

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="highcharts_builder scripts",
        description="Print the JavaScript assets for a chart variant and engine, one per line.",
    )
    p.add_argument("--type", default=ChartType.HIGHCHART.value, choices=[t.value for t in ChartType])
    p.add_argument("--engine", default=JsEngine.JQUERY.value, choices=[e.value for e in JsEngine])
    p.add_argument(
        "--extra",
        nargs="*",
        default=None,
        help="Extra script keys to include. Pass the flag with no keys to include all extras.",
    )
    p.add_argument("--config", default=None, help="YAML file overriding the default script locations.")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        chart = Highchart(chart_type=args.type, js_engine=args.engine, config_path=args.config)
        if args.extra is not None:
            chart.include_extra_scripts(args.extra)
        scripts = chart.get_scripts()
    except HighchartsError as exc:
        logger.error("Failed to resolve scripts: %s", exc)
        return 1

    for src in scripts:
        print(src)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
