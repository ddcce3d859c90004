"""
Execute built statements against a registered database.

- execute_statement: one statement -> StatementResult
- execute_script: free-form SQL split on ';' -> one StatementResult per statement

Driver errors are logged and re-raised as StatementExecutionError; nothing is
retried.
"""

import logging
import sqlite3

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from roominspector.core.connect import execute
from roominspector.core.registry import InspectedDatabase
from roominspector.schemas import StatementResult

_log = logging.getLogger(__name__)

_SEPARATORS = " \t\r\n;"


class StatementExecutionError(ValueError):
    """Raised when the database rejects or fails to run a statement."""

    def __init__(self, message: str, statement: str) -> None:
        super().__init__(message)
        self.statement = statement


def _split_statements(sql: str) -> list[str]:
    """Split SQL into complete statements.

    Text is accumulated up to each ``;`` until ``sqlite3.complete_statement``
    accepts it, so semicolons inside literals, comments and trigger bodies
    (``BEGIN ...; END``) do not end a statement. The terminating ``;`` is
    dropped; text after the last ``;`` is kept as a final statement.
    """
    stmts: list[str] = []
    buf = ""
    pieces = sql.split(";")
    for piece in pieces[:-1]:
        buf += piece + ";"
        if sqlite3.complete_statement(buf):
            stmt = buf.strip(_SEPARATORS)
            if stmt:
                stmts.append(stmt)
            buf = ""
    tail = (buf + pieces[-1]).strip(_SEPARATORS)
    if tail:
        stmts.append(tail)
    return stmts


def execute_statement(database: InspectedDatabase, sql: str) -> StatementResult:
    """Run a single statement against ``database``."""
    _log.debug("Executing on %s: %s", database.name, sql)
    try:
        return execute(database.engine, sql)
    except DBAPIError as e:
        # e.orig is the sqlite3 error; its message is what the user needs to see
        message = str(e.orig) if e.orig is not None else str(e)
        _log.error(
            "SQL execution failed on %s: %s. SQL: %s",
            database.name,
            message,
            sql,
            exc_info=True,
        )
        raise StatementExecutionError(f"SQL execution failed: {message}", sql) from e
    except SQLAlchemyError as e:
        _log.error("SQL execution failed: %s. SQL: %s", e, sql, exc_info=True)
        raise StatementExecutionError(f"SQL execution failed: {e}", sql) from e


def execute_script(database: InspectedDatabase, sql: str) -> list[StatementResult]:
    """
    Run every statement in ``sql`` in order, each in its own transaction.

    Stops at the first failing statement; earlier statements stay committed.
    """
    statements = _split_statements(sql)
    if not statements:
        raise ValueError("sql must contain at least one statement")
    return [execute_statement(database, stmt) for stmt in statements]
