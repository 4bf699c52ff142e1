from __future__ import annotations

from pathlib import Path

import pytest

from highcharts_builder.config.scripts import (
    ScriptAsset,
    ScriptConfig,
    deep_merge,
    load_default_mapping,
    load_script_config,
)
from highcharts_builder.core.errors import ConfigError

KNOWN_KEYS = {
    "jQuery",
    "mootools",
    "prototype",
    "highcharts",
    "highchartsMootoolsAdapter",
    "highchartsPrototypeAdapter",
    "highstock",
    "highstockMootoolsAdapter",
    "highstockPrototypeAdapter",
    "highmaps",
}


def test_defaults_cover_every_known_category():
    config = load_script_config()

    assert KNOWN_KEYS.issubset(config.assets)
    assert set(config.extra) == {"highcharts-more", "exporting"}


def test_asset_url_concatenates_path_and_name():
    asset = ScriptAsset(name="a.js", path="/static/")
    assert asset.url == "/static/a.js"


def test_deep_merge_replaces_recursively_without_mutating_inputs():
    base = {"a": {"name": "x", "path": "p"}, "extra": {"k": {"name": "n", "path": "q"}}}
    merged = deep_merge(base, {"a": {"name": "y"}, "extra": {"j": {"name": "m", "path": "r"}}})

    assert merged["a"] == {"name": "y", "path": "p"}
    assert set(merged["extra"]) == {"k", "j"}
    assert base["a"]["name"] == "x"


def test_overrides_from_yaml_file(tmp_path: Path):
    path = tmp_path / "scripts.yaml"
    path.write_text("highcharts:\n  path: /static/js/\n", encoding="utf-8")

    config = load_script_config(path=path)

    assert config.url("highcharts") == "/static/js/highcharts.js"
    assert config.url("highstock") == "//code.highcharts.com/stock/highstock.js"


def test_env_variable_points_to_override_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    path = tmp_path / "scripts.yaml"
    path.write_text("extra:\n  heatmap:\n    name: heatmap.js\n    path: /m/\n", encoding="utf-8")
    monkeypatch.setenv("HIGHCHARTS_SCRIPTS_CONFIG", str(path))

    config = load_script_config()

    assert config.extra_url("heatmap") == "/m/heatmap.js"


def test_explicit_overrides_win_over_file(tmp_path: Path):
    path = tmp_path / "scripts.yaml"
    path.write_text("jQuery:\n  path: /file/\n", encoding="utf-8")

    config = load_script_config({"jQuery": {"path": "/arg/"}}, path=path)

    assert config.url("jQuery") == "/arg/jquery.min.js"


def test_missing_file_raises_config_error(tmp_path: Path):
    with pytest.raises(ConfigError):
        load_script_config(path=tmp_path / "missing.yaml")


def test_invalid_entry_raises_config_error():
    with pytest.raises(ConfigError):
        load_script_config({"custom": {"name": "only-name.js"}})


def test_missing_key_raises_key_error():
    config = load_script_config()
    with pytest.raises(KeyError):
        config.url("dojo")
    with pytest.raises(ConfigError, match="dojo"):
        config.extra_url("dojo")


def test_round_trip_mapping_matches_defaults():
    config = ScriptConfig.from_mapping(load_default_mapping())
    assert config.to_mapping() == load_default_mapping()


def test_with_extra_returns_new_config():
    config = load_script_config()
    updated = config.with_extra("heatmap", "/m/", "heatmap.js")

    assert "heatmap" in updated.extra
    assert "heatmap" not in config.extra
