import logging
from collections.abc import Callable
from typing import Annotated, Any

from fastapi import Depends, HTTPException, status

from roominspector.core.registry import (
    DatabaseNotRegisteredError,
    InspectedDatabase,
    get_registry,
)
from roominspector.engines.sql.executor import (
    StatementExecutionError,
    execute_statement,
)
from roominspector.schemas import StatementResult, TableData

_log = logging.getLogger(__name__)


def get_database(db: str) -> InspectedDatabase:
    try:
        return get_registry().get(db)
    except DatabaseNotRegisteredError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Database not registered: {db}",
        )


DatabaseDep = Annotated[InspectedDatabase, Depends(get_database)]


def run_statement(database: InspectedDatabase, sql: str) -> StatementResult:
    """Execute ``sql``; execution failures become 400 with the driver message."""
    try:
        return execute_statement(database, sql)
    except StatementExecutionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def run_query(database: InspectedDatabase, sql: str) -> TableData:
    """Execute a row-returning statement and return its table."""
    result = run_statement(database, sql)
    return result.table if result.table is not None else TableData()


def run_update(database: InspectedDatabase, sql: str) -> int:
    """Execute a statement that changes rows and return its rowcount."""
    result = run_statement(database, sql)
    return result.rowcount or 0


def build_or_422(build: Callable[..., str], *args: Any, **kwargs: Any) -> str:
    """Call a builder; a rejected argument (ValueError) becomes 422."""
    try:
        return build(*args, **kwargs)
    except ValueError as e:
        _log.warning("Rejected statement input: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )
