"""
Smoke test: verify that the package is installable and importable.

It should pass only if the project is installed (e.g., `pip install -e .`).
"""

from __future__ import annotations

import importlib
from importlib import metadata

PACKAGE_NAME = "highcharts_builder"
DIST_NAME = "highcharts-builder"


def test_import_package() -> None:
    module = importlib.import_module(PACKAGE_NAME)
    assert module is not None


def test_distribution_version_available() -> None:
    version = metadata.version(DIST_NAME)
    assert isinstance(version, str)
    assert version.strip() != ""


def test_package_version_attribute() -> None:
    module = importlib.import_module(PACKAGE_NAME)
    assert module.__version__.strip() != ""


def test_public_api_exports() -> None:
    module = importlib.import_module(PACKAGE_NAME)
    for name in ("Highchart", "HighchartOption", "JsExpr", "render"):
        assert hasattr(module, name)
