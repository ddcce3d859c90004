"""
Row screens: select a row by position, insert, update and delete.

Update and delete target rows by their full current value snapshot; every row
matching the snapshot is affected.
"""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, status

from roominspector.api.deps import (
    DatabaseDep,
    build_or_422,
    run_query,
    run_update,
)
from roominspector.core.config import settings
from roominspector.core.registry import InspectedDatabase
from roominspector.engines.sql import (
    ColumnValue,
    delete_row,
    insert_row,
    list_rows,
    update_row,
)
from roominspector.schemas import (
    ColumnValueIn,
    RowDeleteIn,
    RowInsertIn,
    RowSelected,
    RowsAffected,
    RowUpdateIn,
)

_log = logging.getLogger(__name__)

router = APIRouter(prefix="/databases", tags=["rows"])


def _select_row(database: InspectedDatabase, table: str, index: int) -> list[ColumnValue]:
    data = run_query(database, list_rows(table))
    try:
        return data.select(index)
    except IndexError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{db}/tables/{table}/rows/{index}", response_model=RowSelected)
def get_row(database: DatabaseDep, table: str, index: int) -> Any:
    """The row at ``index`` (in list order) as column/value pairs."""
    pairs = _select_row(database, table, index)
    return RowSelected(
        index=index,
        values=[ColumnValueIn(column=p.column, value=p.value) for p in pairs],
    )


@router.post(
    "/{db}/tables/{table}/rows",
    response_model=RowsAffected,
    status_code=status.HTTP_201_CREATED,
)
def create_row(database: DatabaseDep, table: str, body: RowInsertIn) -> Any:
    """Insert one row; values follow the table's column order."""
    sql = insert_row(table, body.values, escape=settings.ESCAPE_LITERALS)
    return RowsAffected(statement=sql, rowcount=run_update(database, sql))


@router.put("/{db}/tables/{table}/rows", response_model=RowsAffected)
def update_rows(database: DatabaseDep, table: str, body: RowUpdateIn) -> Any:
    """Set ``values`` on the row(s) currently matching ``match``."""
    sql = build_or_422(
        update_row,
        table,
        [v.to_pair() for v in body.values],
        [m.to_pair() for m in body.match],
        escape=settings.ESCAPE_LITERALS,
    )
    return RowsAffected(statement=sql, rowcount=run_update(database, sql))


@router.post("/{db}/tables/{table}/rows/delete", response_model=RowsAffected)
def delete_rows(database: DatabaseDep, table: str, body: RowDeleteIn) -> Any:
    """Delete the row(s) matching the value snapshot in ``match``."""
    sql = build_or_422(
        delete_row,
        table,
        [m.to_pair() for m in body.match],
        escape=settings.ESCAPE_LITERALS,
    )
    return RowsAffected(statement=sql, rowcount=run_update(database, sql))


@router.delete("/{db}/tables/{table}/rows/{index}", response_model=RowsAffected)
def delete_row_at(database: DatabaseDep, table: str, index: int) -> Any:
    """Delete the row currently listed at ``index`` (and any identical rows)."""
    pairs = _select_row(database, table, index)
    sql = build_or_422(delete_row, table, pairs, escape=settings.ESCAPE_LITERALS)
    rowcount = run_update(database, sql)
    if rowcount == 0:
        # BLOB cells and untyped numeric cells do not match their display text
        _log.warning("Delete of %s row %d matched no rows: %s", table, index, sql)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Row {index} could not be matched by its displayed values",
        )
    return RowsAffected(statement=sql, rowcount=rowcount)
