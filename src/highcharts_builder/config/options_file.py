"""Load chart options from YAML/JSON files."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from highcharts_builder.core.errors import ConfigError
from highcharts_builder.options.js_expr import JsExpr


class OptionsLoader(yaml.SafeLoader):
    """SafeLoader with a ``!js`` tag for raw JavaScript, e.g. ``formatter: !js "function () {...}"``."""


def _construct_js(loader: yaml.SafeLoader, node: yaml.Node) -> JsExpr:
    return JsExpr(loader.construct_scalar(node))


OptionsLoader.add_constructor("!js", _construct_js)


def load_options(path: str | Path) -> dict[str, Any]:
    """Read a mapping of root option names to values. JSON files parse as YAML too."""
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Options file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.load(f, Loader=OptionsLoader) or {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Options file must contain a mapping of root options: {path}")
    return dict(data)
