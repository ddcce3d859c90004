"""
SQL literal rendering for the statement builder.

Values are always embedded as single-quoted literals. ``None`` is the only
value rendered without quotes (``NULL``).
"""

from collections.abc import Iterable, Sequence
from typing import NamedTuple

# Single-quote escape for SQL strings
_SQL_QUOTE_ESCAPE = str.maketrans({"'": "''"})


class ColumnValue(NamedTuple):
    """A column name paired with the value it holds (or should hold)."""

    column: str
    value: str | None


def quote_literal(value: str | None, *, escape: bool = True) -> str:
    """
    Render ``value`` as a SQL literal. None -> 'NULL' (bare keyword).

    With ``escape=False`` the value is wrapped verbatim, so a value containing
    ``'`` produces malformed SQL that only fails when executed.
    """
    if value is None:
        return "NULL"
    s = str(value)
    if escape:
        s = s.translate(_SQL_QUOTE_ESCAPE)
    return f"'{s}'"


def zip_columns(
    columns: Sequence[str], values: Sequence[str | None]
) -> list[ColumnValue]:
    """Pair ``columns[i]`` with ``values[i]``; lengths must match."""
    if len(columns) != len(values):
        raise ValueError(
            f"columns and values differ in length ({len(columns)} != {len(values)})"
        )
    return [ColumnValue(c, v) for c, v in zip(columns, values)]


def as_pairs(
    pairs: Iterable[ColumnValue | tuple[str, str | None]],
) -> list[ColumnValue]:
    """Normalise plain ``(column, value)`` tuples into ColumnValue."""
    return [p if isinstance(p, ColumnValue) else ColumnValue(*p) for p in pairs]
