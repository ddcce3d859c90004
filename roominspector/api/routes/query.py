"""
Query screen: run free-form SQL typed by the developer.
"""

from typing import Any

from fastapi import APIRouter, HTTPException, status

from roominspector.api.deps import DatabaseDep
from roominspector.core.config import settings
from roominspector.engines.sql.executor import StatementExecutionError, execute_script
from roominspector.schemas import QueryIn, QueryOut

router = APIRouter(prefix="/databases", tags=["query"])


@router.post("/{db}/query", response_model=QueryOut)
def run_sql(database: DatabaseDep, body: QueryIn) -> Any:
    """
    Execute ``body.sql`` (one or more ';'-separated statements).

    Returns one result per statement: a table for queries, rowcount otherwise.
    """
    if not settings.ALLOW_RAW_QUERIES:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Raw queries are disabled",
        )
    try:
        results = execute_script(database, body.sql)
    except StatementExecutionError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)
        )
    return QueryOut(results=results)
