"""Chart façade: named root options, constructor rendering, script lookup."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from highcharts_builder.config.scripts import ScriptConfig, load_script_config
from highcharts_builder.core.constants import (
    CONSTRUCTORS,
    ENGINE_ADAPTERS,
    ENGINE_SCRIPTS,
    JS_NAMESPACE,
    LIBRARY_SCRIPTS,
    ChartType,
    JsEngine,
    parse_chart_type,
    parse_js_engine,
)
from highcharts_builder.options.option import HighchartOption
from highcharts_builder.options.renderer import render as render_literal
from highcharts_builder.viz.page import build_page
from highcharts_builder.viz.themes import dark_theme_script

logger = logging.getLogger(__name__)

SCRIPT_TAG = '<script type="text/javascript">{}</script>'
SCRIPT_SRC_TAG = '<script type="text/javascript" src="{}"></script>'


class Highchart:
    """
    A chart under construction.

    Root options (``chart``, ``title``, ``series``, ``xAxis``...) are
    reachable as attributes or items and are created on first access:

        chart = Highchart()
        chart.chart.renderTo = "container"
        chart.title.text = "Sales"
        chart.series = [{"name": "2024", "data": [1, 2, 3]}]
        js = chart.render("myChart")
    """

    def __init__(
        self,
        chart_type: ChartType | str | None = ChartType.HIGHCHART,
        js_engine: JsEngine | str | None = JsEngine.JQUERY,
        configurations: Mapping[str, Any] | None = None,
        config_path: str | Path | None = None,
    ) -> None:
        self._chart_type = parse_chart_type(chart_type)
        self._js_engine = parse_js_engine(js_engine)
        self._options: dict[str, HighchartOption] = {}
        self._extra_scripts: list[str] = []
        self._theme: str = ""
        self._use_dark_theme = False
        self._config_path = config_path
        self._confs: ScriptConfig = load_script_config(configurations, self._config_path)

    @property
    def chart_type(self) -> ChartType:
        return self._chart_type

    @property
    def js_engine(self) -> JsEngine:
        return self._js_engine

    @property
    def options(self) -> dict[str, HighchartOption]:
        return self._options

    @property
    def configurations(self) -> ScriptConfig:
        return self._confs

    def set_configurations(self, configurations: Mapping[str, Any] | None = None) -> None:
        """
        Override default script locations, keeping everything not given.

            chart.set_configurations({"jQuery": {"name": "jquery-3.7.1.min.js"}})
        """
        self._confs = load_script_config(configurations, self._config_path)

    # ---- rendering ----

    def render_options(self) -> str:
        return render_literal(self._options)

    def render(
        self,
        var_name: str | None = None,
        callback: str | None = None,
        with_script_tag: bool = False,
    ) -> str:
        """JavaScript creating the chart: ``[var = ]new Highcharts.<Ctor>(options[, callback]);``"""
        result = f"{var_name} = " if var_name is not None else ""
        result += f"new {JS_NAMESPACE}.{CONSTRUCTORS[self._chart_type]}("
        result += self.render_options()
        result += f", {callback}" if callback is not None else ""
        result += ");"

        if with_script_tag:
            result = SCRIPT_TAG.format(result)

        logger.debug("Rendered %s chart (%d chars)", self._chart_type.value, len(result))
        return result

    @staticmethod
    def set_options(options: Any) -> str:
        """
        Library-wide options (``lang``, ``global``...) for ``Highcharts.setOptions``.

        Accepts a HighchartOption or plain data.
        """
        return f"{JS_NAMESPACE}.setOptions({render_literal(options)});"

    # ---- scripts ----

    def get_scripts(self) -> list[str]:
        """URLs of the scripts the page must include, in load order."""
        scripts = [self._confs.url(ENGINE_SCRIPTS[self._js_engine])]

        adapters = ENGINE_ADAPTERS.get(self._js_engine)
        if adapters is not None:
            charts_adapter, stock_adapter = adapters
            adapter = charts_adapter if self._chart_type is ChartType.HIGHCHART else stock_adapter
            scripts.append(self._confs.url(adapter))

        scripts.append(self._confs.url(LIBRARY_SCRIPTS[self._chart_type]))

        for key in self._extra_scripts:
            scripts.append(self._confs.extra_url(key))

        return scripts

    def render_scripts(self) -> str:
        return "".join(SCRIPT_SRC_TAG.format(src) for src in self.get_scripts())

    def add_extra_script(self, key: str, path: str, name: str) -> None:
        self._confs = self._confs.with_extra(key, path, name)

    def include_extra_scripts(self, keys: list[str] | None = None) -> None:
        """Select extra scripts by key; no keys selects every registered extra."""
        self._extra_scripts = list(keys) if keys else list(self._confs.extra)

    # ---- theme & page ----

    def set_theme(self, theme: str) -> None:
        self._theme = theme

    def set_use_dark_theme(self, use_dark_theme: bool = True) -> None:
        self._use_dark_theme = use_dark_theme

    def get_theme(self) -> str | None:
        if self._theme:
            return self._theme
        if self._use_dark_theme:
            return dark_theme_script()
        return None

    def _leaf_text(self, root: str, key: str) -> str:
        # lookups here must not grow the option tree
        node = self._options.get(root)
        child = node.find(key) if node is not None else None
        if child is None or not child.is_leaf or child.value() is None:
            return ""
        return str(child.value())

    def get_title_text(self) -> str:
        return self._leaf_text("title", "text")

    def get_render_to(self) -> str:
        return self._leaf_text("chart", "renderTo")

    def get_html(self) -> str:
        return build_page(
            title=self.get_title_text(),
            container_id=self.get_render_to(),
            scripts=self.render_scripts(),
            chart_js=self.render(),
            theme=self.get_theme(),
        )

    # ---- root option access ----

    def get(self, name: str) -> HighchartOption:
        if name not in self._options:
            self._options[name] = HighchartOption()
        return self._options[name]

    def set(self, name: str, value: Any) -> HighchartOption:
        node = HighchartOption(value)
        self._options[name] = node
        return node

    def exists(self, name: str) -> bool:
        return name in self._options

    def unset(self, name: str) -> None:
        self._options.pop(name, None)

    def __getattr__(self, name: str) -> HighchartOption:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    __getitem__ = get
    __setitem__ = set
    __delitem__ = unset
    __contains__ = exists

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._options))

    # ---- copying ----

    def copy(self) -> Highchart:
        return copy.deepcopy(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> Highchart:
        clone = object.__new__(type(self))
        for attr, value in self.__dict__.items():
            object.__setattr__(clone, attr, copy.deepcopy(value, memo))
        return clone

    def __repr__(self) -> str:
        roots = ", ".join(self._options)
        return f"Highchart({self._chart_type.value}, {self._js_engine.value}, roots=[{roots}])"
