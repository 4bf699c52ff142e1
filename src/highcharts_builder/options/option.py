"""Recursive, order-preserving option tree with lazy child creation."""

from __future__ import annotations

import copy
import math
from collections.abc import Iterator, Mapping
from datetime import date, datetime, timezone
from typing import Any

import numpy as np
import pandas as pd

from highcharts_builder.options.js_expr import JsExpr

Key = str | int

# "no value given": the node starts as an empty branch
_EMPTY = object()


def _is_index(key: object) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _epoch_ms(value: date) -> int:
    """Milliseconds since the Unix epoch, the unit Highcharts datetime axes use."""
    if isinstance(value, pd.Timestamp):
        if value.tzinfo is None:
            value = value.tz_localize("UTC")
        return int(value.value // 1_000_000)
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def normalize_value(value: Any) -> Any:
    """
    Map numpy/pandas/datetime values onto plain Python ones.

    Containers are left alone (they become child nodes); arrays and
    Series become lists so they are treated as sequences.
    """
    if value is pd.NaT:
        return None
    if isinstance(value, (datetime, date)):
        return _epoch_ms(value)
    if isinstance(value, np.datetime64):
        return _epoch_ms(pd.Timestamp(value))
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, (np.ndarray, pd.Series, pd.Index)):
        return value.tolist()
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


class HighchartOption:
    """
    One node of a chart configuration: either a leaf value or a branch.

    Branches keep their children in insertion order. Reading a missing
    child creates an empty branch under that key, so chained access like
    ``options.plotOptions.series.marker.enabled = False`` builds the
    structure on demand.

    A branch built from a list, grown with ``append``, or whose keys are
    exactly the integers 0..n-1 in order (``series[0].name = ...``) is a
    sequence and renders as an array. Giving a sequence a string key turns
    it into a mapping.

    Attribute access reaches the node methods first, so options named like
    one of them (``value``, ``get``, ``set``, ``find``, ``merge``, ``append``,
    ``children``, ``exists``, ``unset``) must use item access:
    ``plot_line["value"] = 3``.
    """

    __slots__ = ("_children", "_value", "_leaf", "_sequence")

    def __init__(self, value: Any = _EMPTY) -> None:
        object.__setattr__(self, "_children", {})
        object.__setattr__(self, "_value", None)
        object.__setattr__(self, "_leaf", False)
        object.__setattr__(self, "_sequence", False)
        self._assign(value)

    def _assign(self, value: Any) -> None:
        self._children.clear()
        object.__setattr__(self, "_value", None)
        object.__setattr__(self, "_leaf", False)
        object.__setattr__(self, "_sequence", False)

        if value is _EMPTY:
            return
        value = normalize_value(value)
        if isinstance(value, HighchartOption):
            # Copy so the tree never aliases a node owned elsewhere
            value = copy.deepcopy(value)
            object.__setattr__(self, "_children", value._children)
            object.__setattr__(self, "_value", value._value)
            object.__setattr__(self, "_leaf", value._leaf)
            object.__setattr__(self, "_sequence", value._sequence)
        elif isinstance(value, Mapping):
            for k, v in value.items():
                self.set(k, v)
        elif isinstance(value, (list, tuple)):
            object.__setattr__(self, "_sequence", True)
            for item in value:
                self.append(item)
        else:
            object.__setattr__(self, "_value", value)
            object.__setattr__(self, "_leaf", True)

    # ---- state ----

    @property
    def is_leaf(self) -> bool:
        return self._leaf

    @property
    def is_sequence(self) -> bool:
        if self._leaf:
            return False
        if self._sequence:
            return True
        keys = list(self._children)
        return bool(keys) and all(_is_index(k) for k in keys) and keys == list(range(len(keys)))

    def value(self) -> Any:
        """Leaf payload, or the nested dict/list built from the children."""
        if self._leaf:
            return self._value
        if self.is_sequence:
            return [child.value() for child in self._children.values()]
        return {k: child.value() for k, child in self._children.items()}

    def children(self) -> dict[Key, HighchartOption]:
        return dict(self._children)

    # ---- mapping operations ----

    def set(self, key: Key, value: Any) -> HighchartOption:
        """Store ``value`` under ``key`` as a fresh child node and return it."""
        if self._leaf:
            # assigning a child turns a leaf into a branch
            object.__setattr__(self, "_value", None)
            object.__setattr__(self, "_leaf", False)
        if self._sequence and not _is_index(key):
            # a named key makes the sequence a mapping keyed by position
            object.__setattr__(self, "_sequence", False)
        child = HighchartOption(value)
        self._children[key] = child
        return child

    def get(self, key: Key) -> HighchartOption:
        """Return the child under ``key``, creating an empty branch if missing."""
        child = self._children.get(key)
        if child is None:
            child = self.set(key, _EMPTY)
        return child

    def find(self, key: Key) -> HighchartOption | None:
        """Like ``get`` but never creates anything."""
        return self._children.get(key)

    def exists(self, key: Key) -> bool:
        return key in self._children

    def unset(self, key: Key) -> None:
        self._children.pop(key, None)

    def append(self, value: Any) -> HighchartOption:
        """Append ``value`` to a sequence branch (an empty branch becomes one)."""
        if not self.is_sequence:
            if self._leaf or self._children:
                raise TypeError("append() needs a sequence or an empty option")
            object.__setattr__(self, "_sequence", True)
        key = len(self._children)
        while key in self._children:
            key += 1
        return self.set(key, value)

    def merge(self, values: Mapping[Key, Any]) -> HighchartOption:
        """Recursively merge ``values``: nested mappings merge, anything else replaces."""
        for k, v in values.items():
            current = self._children.get(k)
            if (
                isinstance(v, Mapping)
                and current is not None
                and not current.is_leaf
                and not current.is_sequence
            ):
                current.merge(v)
            else:
                self.set(k, v)
        return self

    # ---- python protocols ----

    def __getattr__(self, name: str) -> HighchartOption:
        # only reached for names that are not real attributes
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
        else:
            self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name.startswith("_"):
            object.__delattr__(self, name)
        else:
            self.unset(name)

    def __getitem__(self, key: Key) -> HighchartOption:
        return self.get(key)

    def __setitem__(self, key: Key, value: Any) -> None:
        self.set(key, value)

    def __delitem__(self, key: Key) -> None:
        self.unset(key)

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __iter__(self) -> Iterator[Key]:
        return iter(list(self._children))

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        return self._leaf or bool(self._children)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HighchartOption):
            return (
                self._leaf == other._leaf
                and self.is_sequence == other.is_sequence
                and self.value() == other.value()
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __deepcopy__(self, memo: dict[int, Any]) -> HighchartOption:
        clone = HighchartOption()
        object.__setattr__(clone, "_value", copy.deepcopy(self._value, memo))
        object.__setattr__(clone, "_leaf", self._leaf)
        object.__setattr__(clone, "_sequence", self._sequence)
        for k, child in self._children.items():
            clone._children[k] = copy.deepcopy(child, memo)
        return clone

    def __copy__(self) -> HighchartOption:
        return self.__deepcopy__({})

    def __repr__(self) -> str:
        if self._leaf:
            return f"HighchartOption({self._value!r})"
        return f"HighchartOption({self.value()!r})"
