from __future__ import annotations

import json

import pytest

from highcharts_builder.core.errors import RenderError
from highcharts_builder.options.js_expr import JsExpr
from highcharts_builder.options.option import HighchartOption
from highcharts_builder.options.renderer import render


def test_render_roots_mapping():
    roots = {"title": HighchartOption()}
    roots["title"].text = "Sales"

    assert render(roots) == '{"title":{"text":"Sales"}}'


def test_render_keeps_insertion_order_not_sorted():
    node = HighchartOption()
    node.zeta = 1
    node.alpha = 2
    node.mid = 3

    assert render(node) == '{"zeta":1,"alpha":2,"mid":3}'


def test_render_scalars_follow_json_rules():
    node = HighchartOption({"s": 'say "hi"', "i": 3, "f": 1.5, "t": True, "n": None, "u": "é"})
    out = render(node)

    assert out == '{"s":"say \\"hi\\"","i":3,"f":1.5,"t":true,"n":null,"u":"\\u00e9"}'
    assert json.loads(out)["s"] == 'say "hi"'


def test_render_nan_and_inf_as_null():
    assert render([float("nan"), float("inf"), 1]) == "[null,null,1]"


def test_render_empty_branch_is_empty_object():
    root = HighchartOption()
    root.get("credits")
    assert render(root) == '{"credits":{}}'


def test_render_raw_code_unquoted():
    root = HighchartOption()
    root.tooltip.formatter = JsExpr("function () { return this.y; }")
    root.tooltip.shared = True

    assert render(root) == '{"tooltip":{"formatter":function () { return this.y; },"shared":true}}'


def test_render_raw_code_inside_plain_data():
    data = {"events": {"load": JsExpr("onLoad")}, "list": [JsExpr("a"), "a"]}
    assert render(data) == '{"events":{"load":onLoad},"list":[a,"a"]}'


def test_render_nested_tree_is_valid_json_without_raw_code():
    root = HighchartOption()
    root.chart.renderTo = "container"
    root.xAxis.categories = ["Jan", "Feb"]
    root.series.append({"name": "a", "data": [1, 2, [3, 4]]})
    root.series.append({"name": "b", "data": []})
    root.plotOptions.series.marker.enabled = False

    parsed = json.loads(render(root))

    assert parsed == root.value()
    assert list(parsed) == ["chart", "xAxis", "series", "plotOptions"]


def test_render_integer_keys_are_quoted():
    assert render({1: "a"}) == '{"1":"a"}'


def test_render_unsupported_type_raises():
    with pytest.raises(RenderError):
        render({"bad": object()})


def test_render_error_is_type_error():
    with pytest.raises(TypeError):
        render(HighchartOption({"bad": {1, 2}}))


def test_render_escapes_closing_tags_in_strings_and_keys():
    out = render({"</b>": "</script><script>alert(1)</script>"})

    assert "</" not in out
    assert out == '{"<\\/b>":"<\\/script><script>alert(1)<\\/script>"}'
    assert json.loads(out) == {"</b>": "</script><script>alert(1)</script>"}


def test_render_index_keyed_branch_as_array():
    root = HighchartOption()
    root[0] = "a"
    root[1] = {"b": 2}

    assert render(root) == '["a",{"b":2}]'


def test_render_sequence_with_named_key_as_object():
    root = HighchartOption(["a"])
    root["extra"] = 1

    assert render(root) == '{"0":"a","extra":1}'
