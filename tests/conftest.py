from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _no_script_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # keep the packaged defaults regardless of the developer's environment
    monkeypatch.delenv("HIGHCHARTS_SCRIPTS_CONFIG", raising=False)


@pytest.fixture
def options_yaml_path(tmp_path: Path) -> Path:
    path = tmp_path / "chart.yaml"
    path.write_text(
        """
chart:
  renderTo: container
  type: line
title:
  text: Monthly Sales
xAxis:
  categories: [Jan, Feb, Mar]
tooltip:
  formatter: !js "function () { return this.y; }"
series:
  - name: "2024"
    data: [1, 2.5, 3]
""",
        encoding="utf-8",
    )
    return path
