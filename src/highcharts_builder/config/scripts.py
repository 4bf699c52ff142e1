"""Script asset configuration: packaged defaults, YAML overrides, validation."""

from __future__ import annotations

import copy
import logging
import os
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from highcharts_builder.core.constants import SCRIPT_CONFIG_ENV
from highcharts_builder.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS_RESOURCE = "config/scripts.yaml"


class ScriptAsset(BaseModel):
    """One JavaScript file: its directory/URL prefix and file name."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str

    @property
    def url(self) -> str:
        return f"{self.path}{self.name}"


class ScriptConfig(BaseModel):
    """
    The full asset table.

    Top-level keys (``jQuery``, ``highcharts``, ``highstockMootoolsAdapter``...)
    land in ``assets``; the ``extra`` namespace holds optional modules.
    """

    assets: dict[str, ScriptAsset] = Field(default_factory=dict)
    extra: dict[str, ScriptAsset] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ScriptConfig:
        data = dict(data)
        extra = data.pop("extra", None) or {}
        try:
            return cls.model_validate({"assets": data, "extra": extra})
        except PydanticValidationError as exc:
            raise ConfigError(f"Invalid script configuration: {exc}") from exc

    def to_mapping(self) -> dict[str, Any]:
        out: dict[str, Any] = {k: a.model_dump() for k, a in self.assets.items()}
        out["extra"] = {k: a.model_dump() for k, a in self.extra.items()}
        return out

    def url(self, key: str) -> str:
        try:
            return self.assets[key].url
        except KeyError:
            raise ConfigError(f"No script configured for {key!r}") from None

    def extra_url(self, key: str) -> str:
        try:
            return self.extra[key].url
        except KeyError:
            raise ConfigError(f"No extra script configured for {key!r}") from None

    def with_extra(self, key: str, path: str, name: str) -> ScriptConfig:
        extra = dict(self.extra)
        extra[key] = ScriptAsset(name=name, path=path)
        return self.model_copy(update={"extra": extra})


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively replace values of ``base`` with those of ``overrides``."""
    merged = copy.deepcopy(dict(base))
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return dict(data)


def load_default_mapping() -> dict[str, Any]:
    text = resources.files("highcharts_builder").joinpath(DEFAULTS_RESOURCE).read_text(encoding="utf-8")
    return yaml.safe_load(text) or {}


def load_script_config(
    overrides: Mapping[str, Any] | None = None,
    path: str | Path | None = None,
) -> ScriptConfig:
    """
    Build the asset table: packaged defaults <- YAML file <- ``overrides``.

    ``path`` falls back to the HIGHCHARTS_SCRIPTS_CONFIG environment variable.
    """
    data = load_default_mapping()

    path = path or os.environ.get(SCRIPT_CONFIG_ENV)
    if path:
        logger.debug("Merging script configuration from %s", path)
        data = deep_merge(data, _load_yaml(path))

    if overrides:
        data = deep_merge(data, overrides)

    return ScriptConfig.from_mapping(data)
