"""
Statement builder: assembles the SQLite statements used by the inspector.

Every function is pure; nothing is executed here. Table and column names are
interpolated verbatim (they come from the database's own schema), values are
rendered with ``quote_literal``.

Rows are targeted by their full value snapshot, not by a key: ``update_row``
and ``delete_row`` affect every row whose values match, duplicates included.
"""

from collections.abc import Iterable, Sequence

from roominspector.engines.sql.literals import ColumnValue, as_pairs, quote_literal

LIST_TABLES = "SELECT name _id FROM sqlite_master WHERE type ='table'"

PairsIn = Iterable[ColumnValue | tuple[str, str | None]]


def _join(parts: Iterable[str], sep: str) -> str:
    return sep.join(parts)


def _assignment(pair: ColumnValue, *, escape: bool) -> str:
    return f"{pair.column} = {quote_literal(pair.value, escape=escape)}"


def _predicate(pair: ColumnValue, *, escape: bool) -> str:
    if pair.value is None:
        return f"{pair.column} IS NULL"
    return f"{pair.column} = {quote_literal(pair.value, escape=escape)}"


def _where(match: Sequence[ColumnValue], *, escape: bool) -> str:
    if not match:
        raise ValueError("at least one column is required to match a row")
    return _join((_predicate(p, escape=escape) for p in match), " AND ")


def list_tables() -> str:
    """Names of all tables in the database, selected as ``_id``."""
    return LIST_TABLES


def list_columns(table: str) -> str:
    """Column metadata (cid, name, type, notnull, dflt_value, pk) of ``table``."""
    return f"PRAGMA table_info({table})"


def list_rows(table: str) -> str:
    return f"SELECT * FROM {table}"


def drop_table(table: str) -> str:
    return f"DROP TABLE {table}"


def clear_table(table: str) -> str:
    """Delete every row of ``table``; the schema is kept."""
    return f"DELETE FROM {table}"


def insert_row(
    table: str, values: Sequence[str | None], *, escape: bool = True
) -> str:
    """
    Insert one row, ``values`` bound positionally to the table's column order.

    >>> insert_row("t", ["a", "b"])
    "INSERT INTO t VALUES('a','b')"
    """
    literals = _join((quote_literal(v, escape=escape) for v in values), ",")
    return f"INSERT INTO {table} VALUES({literals})"


def update_row(
    table: str,
    assignments: PairsIn,
    match: PairsIn,
    *,
    escape: bool = True,
) -> str:
    """
    Set each ``assignments`` column to its new value on the row(s) whose
    current values equal every pair in ``match``.
    """
    new = as_pairs(assignments)
    if not new:
        raise ValueError("at least one column is required to update a row")
    set_clause = _join((_assignment(p, escape=escape) for p in new), ", ")
    where_clause = _where(as_pairs(match), escape=escape)
    return f"UPDATE {table} SET {set_clause} WHERE {where_clause}"


def delete_row(table: str, match: PairsIn, *, escape: bool = True) -> str:
    """Delete the row(s) whose values equal every pair in ``match``."""
    return f"DELETE FROM {table} WHERE {_where(as_pairs(match), escape=escape)}"
