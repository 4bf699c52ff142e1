"""Turn pandas DataFrames into Highcharts series/axis payloads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import pandas as pd

from highcharts_builder.core.errors import ValidationError
from highcharts_builder.options.option import normalize_value


def _require_columns(df: pd.DataFrame, columns: Sequence[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValidationError(f"Missing columns: {missing}. Available: {list(df.columns)}")


def series_from_frame(
    df: pd.DataFrame,
    y: str | Sequence[str],
    x: str | None = None,
    names: Mapping[str, str] | None = None,
) -> list[dict[str, Any]]:
    """
    Build one series per ``y`` column.

    With ``x`` the points are ``[x, y]`` pairs (datetimes become epoch
    milliseconds), otherwise a flat list of y values. Missing values
    become ``None`` so Highcharts draws a gap.
    """
    y_columns = [y] if isinstance(y, str) else list(y)
    _require_columns(df, y_columns + ([x] if x else []))
    names = names or {}

    series = []
    for col in y_columns:
        values = [normalize_value(v) for v in df[col].tolist()]
        if x:
            xs = [normalize_value(v) for v in df[x].tolist()]
            data: list[Any] = [[xv, yv] for xv, yv in zip(xs, values)]
        else:
            data = values
        series.append({"name": names.get(col, str(col)), "data": data})
    return series


def categories_from_frame(df: pd.DataFrame, column: str) -> list[str]:
    """Axis categories: the column's values as strings, in row order."""
    _require_columns(df, [column])
    return df[column].astype(str).tolist()
