"""Display-ready table models handed to the rendering layer."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TableRow(BaseModel):
    """A subject name followed by its ordered display values."""

    name: str
    attributes: list[str] = Field(default_factory=list)
    command: str | None = None


class UtilizationTable(BaseModel):
    """Header plus ordered body rows.

    The header's ``name`` labels the subject column and its ``attributes``
    label the value columns.
    """

    header: TableRow
    body: list[TableRow] = Field(default_factory=list)
    title: str | None = None

    def columns(self) -> tuple[str, ...]:
        """Return all column labels, subject column first."""
        return (self.header.name, *self.header.attributes)

    def rows(self) -> list[tuple[str, ...]]:
        """Return body rows as plain string tuples, subject first."""
        return [(row.name, *row.attributes) for row in self.body]

    def find_row(self, name: str) -> TableRow | None:
        """Return the first body row with the given subject name."""
        return next((row for row in self.body if row.name == name), None)
