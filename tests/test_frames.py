from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from highcharts_builder.core.errors import ValidationError
from highcharts_builder.data.frames import categories_from_frame, series_from_frame
from highcharts_builder.viz.highchart import Highchart


def _make_df() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "day": pd.to_datetime(["2024-01-01", "2024-01-02"]),
            "month": ["Jan", "Feb"],
            "cost": [1.5, np.nan],
            "users": np.array([10, 12], dtype=np.int64),
        }
    )


def test_series_without_x_is_flat_values():
    series = series_from_frame(_make_df(), ["cost", "users"])

    assert series == [
        {"name": "cost", "data": [1.5, None]},
        {"name": "users", "data": [10, 12]},
    ]


def test_series_with_datetime_x_uses_epoch_ms():
    series = series_from_frame(_make_df(), "users", x="day", names={"users": "Active users"})

    assert series == [
        {"name": "Active users", "data": [[1704067200000, 10], [1704153600000, 12]]},
    ]


def test_missing_column_raises_validation_error():
    with pytest.raises(ValidationError):
        series_from_frame(_make_df(), "revenue")
    with pytest.raises(ValidationError):
        categories_from_frame(_make_df(), "year")


def test_categories_as_strings():
    assert categories_from_frame(_make_df(), "month") == ["Jan", "Feb"]


def test_frame_series_render_in_chart():
    df = _make_df()
    chart = Highchart()
    chart.xAxis.categories = categories_from_frame(df, "month")
    chart.series = series_from_frame(df, "cost")

    assert chart.render_options() == (
        '{"xAxis":{"categories":["Jan","Feb"]},"series":[{"name":"cost","data":[1.5,null]}]}'
    )
