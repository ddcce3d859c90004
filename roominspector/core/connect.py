"""
Engine helpers for inspected SQLite databases.

The host application hands over its SQLAlchemy Engine (or a path/URL); text
built by the statement builder is run with ``exec_driver_sql`` so the driver
receives it exactly as built.
"""

from os import PathLike
from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import CursorResult, Engine

from roominspector.core.config import settings
from roominspector.schemas import StatementResult, TableData


def create_database_engine(database: Engine | str | PathLike[str]) -> Engine:
    """
    Return an Engine for ``database``.

    - Engine: returned unchanged (the host app's own engine).
    - ``sqlite:`` URL string: passed to create_engine.
    - anything else: treated as a filesystem path to a SQLite file.
    """
    if isinstance(database, Engine):
        return database
    url = str(database)
    if not url.startswith("sqlite:"):
        url = f"sqlite:///{url}"
    return create_engine(
        url,
        connect_args={"check_same_thread": False, "timeout": settings.SQLITE_TIMEOUT},
    )


def display_value(value: Any) -> str | None:
    """Cell value as shown in a table: None stays None, bytes become hex."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    return str(value)


def result_to_table(result: CursorResult[Any]) -> TableData:
    """Convert a row-returning result to TableData (column order preserved)."""
    columns = [str(k) for k in result.keys()]
    rows = [[display_value(v) for v in row] for row in result.fetchall()]
    return TableData(columns=columns, rows=rows)


def execute(engine: Engine, sql: str) -> StatementResult:
    """
    Run one statement in its own transaction.

    Returns StatementResult with ``table`` for statements that return rows
    (SELECT, PRAGMA), otherwise ``rowcount``.
    """
    with engine.begin() as conn:
        result = conn.exec_driver_sql(sql)
        if result.returns_rows:
            return StatementResult(statement=sql, table=result_to_table(result))
        rowcount = result.rowcount if result.rowcount is not None else 0
        return StatementResult(statement=sql, rowcount=max(rowcount, 0))
