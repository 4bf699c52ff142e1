"""Built-in dark theme, rendered through the same option renderer as charts."""

from __future__ import annotations

from typing import Any

from highcharts_builder.options.renderer import render

_LABEL = {"style": {"color": "#E0E0E3"}}
_AXIS_TITLE = {"style": {"color": "#A0A0A3"}}


def _axis(**extra: Any) -> dict[str, Any]:
    axis = {
        "gridLineColor": "#707073",
        "labels": _LABEL,
        "lineColor": "#707073",
        "minorGridLineColor": "#505053",
        "tickColor": "#707073",
        "title": _AXIS_TITLE,
    }
    axis.update(extra)
    return axis


DARK_THEME: dict[str, Any] = {
    "colors": [
        "#2b908f", "#90ee7e", "#f45b5b", "#7798BF", "#aaeeee", "#ff0066",
        "#eeaaee", "#55BF3B", "#DF5353", "#7798BF", "#aaeeee",
    ],
    "chart": {
        "backgroundColor": {
            "linearGradient": {"x1": 0, "y1": 0, "x2": 1, "y2": 1},
            "stops": [[0, "#2a2a2b"], [1, "#3e3e40"]],
        },
        "style": {"fontFamily": "'Unica One', sans-serif"},
        "plotBorderColor": "#606063",
    },
    "title": {"style": {"color": "#E0E0E3", "textTransform": "uppercase", "fontSize": "20px"}},
    "subtitle": {"style": {"color": "#E0E0E3", "textTransform": "uppercase"}},
    "xAxis": _axis(),
    "yAxis": _axis(tickWidth=1),
    "tooltip": {"backgroundColor": "rgba(0, 0, 0, 0.85)", "style": {"color": "#F0F0F0"}},
    "plotOptions": {
        "series": {
            "dataLabels": {"color": "#F0F0F3", "style": {"fontSize": "20px"}},
            "marker": {"lineColor": "#333"},
        },
        "boxplot": {"fillColor": "#505053"},
        "candlestick": {"lineColor": "white"},
        "errorbar": {"color": "white"},
    },
    "legend": {
        "backgroundColor": "rgba(0, 0, 0, 0.5)",
        "itemStyle": {"color": "#E0E0E3"},
        "itemHoverStyle": {"color": "#FFF"},
        "itemHiddenStyle": {"color": "#606063"},
        "title": {"style": {"color": "#C0C0C0"}},
    },
    "credits": {"style": {"color": "#666"}},
    "labels": {"style": {"color": "#707073"}},
    "drilldown": {
        "activeAxisLabelStyle": {"color": "#F0F0F3"},
        "activeDataLabelStyle": {"color": "#F0F0F3"},
    },
    "navigation": {
        "buttonOptions": {"symbolStroke": "#DDDDDD", "theme": {"fill": "#505053"}},
    },
    # stock charts
    "rangeSelector": {
        "buttonTheme": {
            "fill": "#505053",
            "stroke": "#000000",
            "style": {"color": "#CCC"},
            "states": {
                "hover": {"fill": "#707073", "stroke": "#000000", "style": {"color": "white"}},
                "select": {"fill": "#000003", "stroke": "#000000", "style": {"color": "white"}},
            },
        },
        "inputBoxBorderColor": "#505053",
        "inputStyle": {"backgroundColor": "#333", "color": "silver"},
        "labelStyle": {"color": "silver"},
    },
    "navigator": {
        "handles": {"backgroundColor": "#666", "borderColor": "#AAA"},
        "outlineColor": "#CCC",
        "maskFill": "rgba(255,255,255,0.1)",
        "series": {"color": "#7798BF", "lineColor": "#A6C7ED"},
        "xAxis": {"gridLineColor": "#505053"},
    },
    "scrollbar": {
        "barBackgroundColor": "#808083",
        "barBorderColor": "#808083",
        "buttonArrowColor": "#CCC",
        "buttonBackgroundColor": "#606063",
        "buttonBorderColor": "#606063",
        "rifleColor": "#FFF",
        "trackBackgroundColor": "#404043",
        "trackBorderColor": "#404043",
    },
}

_FONT_LINK = (
    "Highcharts.createElement('link', {"
    "href: 'https://fonts.googleapis.com/css?family=Unica+One', "
    "rel: 'stylesheet', type: 'text/css'"
    "}, null, document.getElementsByTagName('head')[0]);"
)


def dark_theme_script() -> str:
    """Script tag that loads the Unica One font and applies the dark theme."""
    return (
        '<script type="text/javascript">'
        f"{_FONT_LINK}"
        f"Highcharts.theme = {render(DARK_THEME)};"
        "Highcharts.setOptions(Highcharts.theme);"
        "</script>"
    )
