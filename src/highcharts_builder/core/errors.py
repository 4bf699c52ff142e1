"""Custom exceptions for highcharts_builder."""


from __future__ import annotations


class HighchartsError(Exception):
    """Base exception for the project."""


class ConfigError(HighchartsError, KeyError):
    """Raised when script configuration is missing/invalid."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class RenderError(HighchartsError, TypeError):
    """Raised when an option value cannot be rendered as JavaScript."""


class ValidationError(HighchartsError, ValueError):
    """Raised for invalid input values (e.g., unknown chart type, missing column)."""
