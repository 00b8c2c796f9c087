"""Parsed table models handed between parsing, matching and analysis."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from billmatch.models.fingerprint import ColumnFingerprint


class TableData(BaseModel):
    """Headers plus rows of string cells for one uploaded file."""

    model_config = {"populate_by_name": True, "alias_generator": to_camel, "serialize_by_alias": True}

    filename: str
    headers: list[str]
    rows: list[list[str]] = Field(default_factory=list)

    def column_index(self, column: str) -> int:
        """Return the position of a header, or -1 when absent."""
        try:
            return self.headers.index(column)
        except ValueError:
            return -1

    def column_values(self, index: int) -> list[str]:
        """Live values of one column; short rows contribute an empty cell."""
        return [row[index] if index < len(row) else "" for row in self.rows]


class ParsedTable(TableData):
    """A table parsed from a file, with per-column fingerprints."""

    total_rows: int = 0
    sample_rows: list[list[str]] = Field(default_factory=list)
    column_fingerprints: list[ColumnFingerprint] = Field(default_factory=list)

    def fingerprint_for(self, column: str) -> ColumnFingerprint | None:
        """Fingerprint of a header, or None when the column is unknown."""
        index = self.column_index(column)
        if index == -1 or index >= len(self.column_fingerprints):
            return None
        return self.column_fingerprints[index]
