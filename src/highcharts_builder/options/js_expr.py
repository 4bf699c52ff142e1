"""Raw JavaScript fragments emitted verbatim by the renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class JsExpr:
    """
    A piece of JavaScript source to inject unquoted into rendered options.

    Example:
        chart.tooltip.formatter = JsExpr("function () { return this.y + ' units'; }")
    """

    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str):
            raise TypeError(f"JsExpr code must be a string, got {type(self.code).__name__}")

    def __str__(self) -> str:
        return self.code
