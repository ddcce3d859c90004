"""
Pydantic schemas for the inspector API.

TableData is the contract handed to whatever renders a table: ordered column
names plus rows of display strings, selectable by positional index.
"""

from pydantic import Field, model_validator
from sqlmodel import SQLModel

from roominspector.engines.sql.literals import ColumnValue, zip_columns


class Message(SQLModel):
    message: str


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------


class TableData(SQLModel):
    """Column names plus rows, each row aligned with ``columns``."""

    columns: list[str] = Field(default_factory=list)
    rows: list[list[str | None]] = Field(default_factory=list)

    def select(self, index: int) -> list[ColumnValue]:
        """Row at ``index`` as (column, value) pairs. Raises IndexError."""
        if index < 0 or index >= len(self.rows):
            raise IndexError(f"row index {index} out of range ({len(self.rows)} rows)")
        return zip_columns(self.columns, self.rows[index])

    def column(self, name: str) -> list[str | None]:
        """All values of one column, in row order."""
        i = self.columns.index(name)
        return [row[i] for row in self.rows]


class TablePage(TableData):
    """Body for GET .../rows: one page of rows plus the total row count."""

    total: int
    page: int
    page_size: int


class StatementResult(SQLModel):
    """Outcome of one executed statement: a table for queries, else rowcount."""

    statement: str
    table: TableData | None = None
    rowcount: int | None = None


class InspectedDatabasePublic(SQLModel):
    name: str
    url: str
    dialect: str


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------


class ColumnValueIn(SQLModel):
    column: str = Field(..., min_length=1)
    value: str | None = None

    def to_pair(self) -> ColumnValue:
        return ColumnValue(self.column, self.value)


class RowSelected(SQLModel):
    """Response for row selection: the row's index and its value snapshot."""

    index: int
    values: list[ColumnValueIn]


class RowInsertIn(SQLModel):
    """Body for POST .../rows. Values follow the table's column order."""

    values: list[str | None] = Field(default_factory=list)


class RowUpdateIn(SQLModel):
    """
    Body for PUT .../rows.

    ``values`` are the new values, ``match`` the current snapshot identifying
    the row(s) to update.
    """

    values: list[ColumnValueIn] = Field(..., min_length=1)
    match: list[ColumnValueIn] = Field(..., min_length=1)


class RowDeleteIn(SQLModel):
    """Body for POST .../rows/delete: the value snapshot of the row(s) to delete."""

    match: list[ColumnValueIn] = Field(..., min_length=1)


class RowsAffected(SQLModel):
    statement: str
    rowcount: int


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


class QueryIn(SQLModel):
    sql: str = Field(..., min_length=1)

    @model_validator(mode="after")
    def sql_not_blank(self) -> "QueryIn":
        if not self.sql.strip(" \t\r\n;"):
            raise ValueError("sql must contain a statement")
        return self


class QueryOut(SQLModel):
    results: list[StatementResult]
