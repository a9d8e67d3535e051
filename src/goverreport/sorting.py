from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import Enum

from .errors import InvalidSortKey, InvalidSortOrder
from .models import Summary


class SortKey(Enum):
    FILENAME = "filename"
    PACKAGE = "package"
    BLOCK = "block"
    STMT = "stmt"
    MISSING_BLOCKS = "missing-blocks"
    MISSING_STMTS = "missing-stmts"


class SortOrder(Enum):
    ASC = "asc"
    DESC = "desc"


def _coverage_key(value: float | None) -> tuple[bool, float]:
    # Undefined coverage orders before any defined percentage.
    if value is None:
        return (False, 0.0)
    return (True, value)


SORT_KEY_FUNCS: dict[SortKey, Callable[[Summary], object]] = {
    SortKey.FILENAME: lambda summary: summary.name,
    SortKey.PACKAGE: lambda summary: summary.name,
    SortKey.BLOCK: lambda summary: _coverage_key(summary.block_coverage),
    SortKey.STMT: lambda summary: _coverage_key(summary.stmt_coverage),
    SortKey.MISSING_BLOCKS: lambda summary: summary.missing_blocks,
    SortKey.MISSING_STMTS: lambda summary: summary.missing_stmts,
}


def parse_sort_key(value: str | SortKey) -> SortKey:
    if isinstance(value, SortKey):
        return value
    try:
        return SortKey(value)
    except ValueError:
        choices = ", ".join(key.value for key in SortKey)
        raise InvalidSortKey(f"Invalid sort column '{value}', must be one of {choices}") from None


def parse_sort_order(value: str | SortOrder) -> SortOrder:
    if isinstance(value, SortOrder):
        return value
    try:
        return SortOrder(value)
    except ValueError:
        raise InvalidSortOrder(f"Invalid sort order '{value}', must be either asc or desc") from None


def sort_summaries(
    summaries: Iterable[Summary],
    key: str | SortKey = SortKey.FILENAME,
    order: str | SortOrder = SortOrder.ASC,
) -> list[Summary]:
    """
    Return summaries ordered by one column.

    The ascending sort is stable; descending is its exact reversal so both
    directions break ties the same way.
    """
    sort_key = parse_sort_key(key)
    sort_order = parse_sort_order(order)
    ordered = sorted(summaries, key=SORT_KEY_FUNCS[sort_key])
    if sort_order is SortOrder.DESC:
        ordered.reverse()
    return ordered
