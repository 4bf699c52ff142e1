"""Serialize option trees into JavaScript object literals."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Mapping
from typing import Any

from highcharts_builder.core.errors import RenderError
from highcharts_builder.options.js_expr import JsExpr
from highcharts_builder.options.option import HighchartOption, normalize_value

logger = logging.getLogger(__name__)


def _dump_str(text: str) -> str:
    # an escaped "</" cannot close the surrounding <script> element
    return json.dumps(text, ensure_ascii=True).replace("</", "<\\/")


def _render_key(key: Any) -> str:
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise RenderError(f"Option keys must be str or int, got {type(key).__name__}")
    return _dump_str(str(key))


def _render_scalar(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # NaN/inf are not JSON; Highcharts treats null as a gap
        if math.isnan(value) or math.isinf(value):
            return "null"
        return json.dumps(value)
    if isinstance(value, str):
        return _dump_str(value)
    raise RenderError(f"Cannot render value of type {type(value).__name__}: {value!r}")


def _render_node(node: HighchartOption) -> str:
    if node.is_leaf:
        return _render_value(node.value())
    children = node.children()
    if node.is_sequence:
        return "[" + ",".join(_render_node(c) for c in children.values()) + "]"
    return "{" + ",".join(f"{_render_key(k)}:{_render_node(c)}" for k, c in children.items()) + "}"


def _render_value(value: Any) -> str:
    if isinstance(value, JsExpr):
        return value.code
    if isinstance(value, HighchartOption):
        return _render_node(value)
    value = normalize_value(value)
    if isinstance(value, Mapping):
        return "{" + ",".join(f"{_render_key(k)}:{_render_value(v)}" for k, v in value.items()) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_render_value(v) for v in value) + "]"
    return _render_scalar(value)


def render(options: Any) -> str:
    """
    Render an option node, a mapping of named root nodes, or plain data.

    Output is compact JSON except that ``JsExpr`` values are emitted
    verbatim, so functions and other expressions survive unquoted:

        >>> render({"title": {"text": "Sales"}, "fn": JsExpr("function () {}")})
        '{"title":{"text":"Sales"},"fn":function () {}}'
    """
    result = _render_value(options)
    logger.debug("Rendered options literal (%d chars)", len(result))
    return result
