from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd

from highcharts_builder import Highchart, JsExpr
from highcharts_builder.data.frames import series_from_frame


def main() -> None:
    days = pd.date_range("2025-07-14", periods=7, freq="D")
    rng = np.random.default_rng(0)
    df = pd.DataFrame(
        {
            "date": days,
            "total_cost": rng.uniform(4000, 6000, size=len(days)).round(2),
            "active_users": rng.integers(400, 520, size=len(days)),
        }
    )

    chart = Highchart()
    chart.chart.renderTo = "container"
    chart.chart.type = "line"
    chart.title.text = "Total Cost Trend (7 days)"
    chart.xAxis.type = "datetime"
    chart.yAxis = [{"title": {"text": "total_cost"}}, {"title": {"text": "active_users"}, "opposite": True}]
    chart.tooltip.formatter = JsExpr(
        "function () { return Highcharts.dateFormat('%Y-%m-%d', this.x) + ': ' + this.y; }"
    )
    chart.series = series_from_frame(df, ["total_cost", "active_users"], x="date")
    chart.series[1].yAxis = 1
    chart.include_extra_scripts(["exporting"])

    out_dir = Path("outputs")
    out_dir.mkdir(parents=True, exist_ok=True)

    out_html = out_dir / "chart_sample.html"
    out_html.write_text(chart.get_html(), encoding="utf-8")
    print("Wrote:", out_html)

    print(Highchart.set_options({"lang": {"thousandsSep": " "}}))


if __name__ == "__main__":
    main()
