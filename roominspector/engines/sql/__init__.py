"""
SQL statement builder for the inspector.

Exports the builder functions and quote_literal/ColumnValue/zip_columns.
Execution lives in ``roominspector.engines.sql.executor``.
"""

from roominspector.engines.sql.builder import (
    LIST_TABLES,
    clear_table,
    delete_row,
    drop_table,
    insert_row,
    list_columns,
    list_rows,
    list_tables,
    update_row,
)
from roominspector.engines.sql.literals import (
    ColumnValue,
    as_pairs,
    quote_literal,
    zip_columns,
)

__all__ = [
    "LIST_TABLES",
    "ColumnValue",
    "as_pairs",
    "clear_table",
    "delete_row",
    "drop_table",
    "insert_row",
    "list_columns",
    "list_rows",
    "list_tables",
    "quote_literal",
    "update_row",
    "zip_columns",
]
