from __future__ import annotations

import math
from typing import Any, Callable, Optional, Sequence, TypeVar

from .columns import ColumnSpec, field_value

T = TypeVar("T")

MatchFn = Callable[[Any, str], bool]


def stringify(value: Any) -> str:
    """
    Canonical, locale-independent text for a field value.

    Used by the default search predicate and by the table cells, so what the
    user sees is what the search matches against.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def _row_contains(row: Any, needle: str, keys: Sequence[str]) -> bool:
    return any(needle in stringify(field_value(row, key)).lower() for key in keys)


def make_default_matcher(columns: Sequence[ColumnSpec]) -> MatchFn:
    """
    Case-insensitive substring match over every declared column (OR across columns).
    """
    keys = [col.key for col in columns]

    def matches(row: Any, term: str) -> bool:
        return _row_contains(row, term.lower(), keys)

    return matches


def filter_rows(
    dataset: Sequence[T],
    term: str,
    predicate: Optional[MatchFn] = None,
    columns: Sequence[ColumnSpec] = (),
) -> Sequence[T]:
    """
    Reduce `dataset` to the rows matching `term`, preserving order.

    An empty term returns `dataset` itself; the predicate is never called.
    """
    if not term:
        return dataset

    if predicate is None:
        predicate = make_default_matcher(columns)

    return [row for row in dataset if predicate(row, term)]
