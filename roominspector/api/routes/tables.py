"""
Table screens: list tables, column metadata, rows, drop, clear.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Query

from roominspector.api.deps import DatabaseDep, run_query, run_update
from roominspector.core.config import settings
from roominspector.engines.sql import (
    clear_table,
    drop_table,
    list_columns,
    list_rows,
    list_tables,
)
from roominspector.schemas import Message, RowsAffected, TableData, TablePage

router = APIRouter(prefix="/databases", tags=["tables"])


@router.get("/{db}/tables", response_model=list[str])
def get_tables(database: DatabaseDep) -> Any:
    """Names of all tables in the database."""
    table = run_query(database, list_tables())
    if not table.columns:
        return []
    return table.column("_id")


@router.get("/{db}/tables/{table}/columns", response_model=TableData)
def get_columns(database: DatabaseDep, table: str) -> Any:
    """PRAGMA table_info rows: cid, name, type, notnull, dflt_value, pk."""
    return run_query(database, list_columns(table))


@router.get("/{db}/tables/{table}/rows", response_model=TablePage)
def get_rows(
    database: DatabaseDep,
    table: str,
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=settings.MAX_ROWS_PAGE_SIZE)
    ] = settings.ROWS_PAGE_SIZE,
) -> Any:
    """One page of rows. The statement itself is unordered and unfiltered."""
    data = run_query(database, list_rows(table))
    offset = (page - 1) * page_size
    return TablePage(
        columns=data.columns,
        rows=data.rows[offset : offset + page_size],
        total=len(data.rows),
        page=page,
        page_size=page_size,
    )


@router.delete("/{db}/tables/{table}", response_model=Message)
def delete_table(database: DatabaseDep, table: str) -> Any:
    """Drop the table, its rows and its schema."""
    run_update(database, drop_table(table))
    return Message(message=f"Table {table} dropped")


@router.post("/{db}/tables/{table}/clear", response_model=RowsAffected)
def post_clear_table(database: DatabaseDep, table: str) -> Any:
    """Delete every row; the schema is kept."""
    sql = clear_table(table)
    return RowsAffected(statement=sql, rowcount=run_update(database, sql))
