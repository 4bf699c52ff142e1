"""Constants and enums for chart variants, JS engines and script keys."""

from __future__ import annotations

from enum import Enum

from highcharts_builder.core.errors import ValidationError


class ChartType(str, Enum):
    HIGHCHART = "highchart"
    HIGHSTOCK = "highstock"
    HIGHMAPS = "highmaps"


class JsEngine(str, Enum):
    JQUERY = "jquery"
    MOOTOOLS = "mootools"
    PROTOTYPE = "prototype"


# JavaScript constructor per chart variant: new Highcharts.<name>(...)
CONSTRUCTORS: dict[ChartType, str] = {
    ChartType.HIGHCHART: "Chart",
    ChartType.HIGHSTOCK: "StockChart",
    ChartType.HIGHMAPS: "Map",
}

# Library asset per chart variant (keys of the script configuration)
LIBRARY_SCRIPTS: dict[ChartType, str] = {
    ChartType.HIGHCHART: "highcharts",
    ChartType.HIGHSTOCK: "highstock",
    ChartType.HIGHMAPS: "highmaps",
}

# Framework asset per engine
ENGINE_SCRIPTS: dict[JsEngine, str] = {
    JsEngine.JQUERY: "jQuery",
    JsEngine.MOOTOOLS: "mootools",
    JsEngine.PROTOTYPE: "prototype",
}

# Adapter assets: (highcharts adapter, highstock adapter). jQuery needs none.
ENGINE_ADAPTERS: dict[JsEngine, tuple[str, str]] = {
    JsEngine.MOOTOOLS: ("highchartsMootoolsAdapter", "highstockMootoolsAdapter"),
    JsEngine.PROTOTYPE: ("highchartsPrototypeAdapter", "highstockPrototypeAdapter"),
}

JS_NAMESPACE = "Highcharts"
SCRIPT_CONFIG_ENV = "HIGHCHARTS_SCRIPTS_CONFIG"


def parse_chart_type(value: ChartType | str | None) -> ChartType:
    """Accept an enum member, its value (case-insensitive) or None (default)."""
    if value is None:
        return ChartType.HIGHCHART
    try:
        return ChartType(value.lower() if isinstance(value, str) else value)
    except ValueError as exc:
        allowed = ", ".join(t.value for t in ChartType)
        raise ValidationError(f"Unknown chart type {value!r}. Expected one of: {allowed}") from exc


def parse_js_engine(value: JsEngine | str | None) -> JsEngine:
    if value is None:
        return JsEngine.JQUERY
    try:
        return JsEngine(value.lower() if isinstance(value, str) else value)
    except ValueError as exc:
        allowed = ", ".join(e.value for e in JsEngine)
        raise ValidationError(f"Unknown JS engine {value!r}. Expected one of: {allowed}") from exc
