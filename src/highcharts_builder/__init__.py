"""Build Highcharts configuration objects in Python and render them as JavaScript."""

from __future__ import annotations

from highcharts_builder.core.constants import ChartType, JsEngine
from highcharts_builder.core.errors import (
    ConfigError,
    HighchartsError,
    RenderError,
    ValidationError,
)
from highcharts_builder.options.js_expr import JsExpr
from highcharts_builder.options.option import HighchartOption
from highcharts_builder.options.renderer import render
from highcharts_builder.viz.highchart import Highchart

__version__ = "0.1.0"

__all__ = [
    "ChartType",
    "ConfigError",
    "Highchart",
    "HighchartOption",
    "HighchartsError",
    "JsEngine",
    "JsExpr",
    "RenderError",
    "ValidationError",
    "render",
]
