"""CSV ingestion: raw files to ParsedTable with column fingerprints."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import Iterable

from billmatch.core.exceptions import EmptyTableError, TableParseError
from billmatch.fingerprint.builder import build_fingerprint
from billmatch.models.table import ParsedTable

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_ROWS = 10


def _is_blank(row: list[str]) -> bool:
    # Only truly empty lines; "," is a record of empty cells.
    return row == [] or row == [""]


def parse_csv_text(
    filename: str, text: str, preview_rows: int = DEFAULT_PREVIEW_ROWS
) -> ParsedTable:
    """Parse CSV text whose first row holds the column headers.

    Blank lines are skipped, short rows are padded with empty cells and
    surplus cells beyond the header width are dropped. The first
    ``preview_rows`` rows are kept as ``sample_rows``.
    """
    text = text.removeprefix("\ufeff")
    try:
        records = [row for row in csv.reader(io.StringIO(text, newline=""), strict=True)
                   if not _is_blank(row)]
    except csv.Error as exc:
        raise TableParseError(filename, str(exc)) from exc

    if not records:
        raise EmptyTableError(filename)

    headers = records[0]
    width = len(headers)
    rows = [(row + [""] * (width - len(row)))[:width] for row in records[1:]]
    if not rows:
        raise EmptyTableError(filename)

    fingerprints = [
        build_fingerprint(header, index, [row[index] for row in rows])
        for index, header in enumerate(headers)
    ]
    logger.info("Parsed %s: %d columns, %d rows", filename, width, len(rows))

    return ParsedTable(
        filename=filename,
        headers=headers,
        rows=rows,
        total_rows=len(rows),
        sample_rows=rows[:preview_rows],
        column_fingerprints=fingerprints,
    )


def parse_csv_bytes(
    filename: str, data: bytes, preview_rows: int = DEFAULT_PREVIEW_ROWS
) -> ParsedTable:
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise TableParseError(filename, f"not valid UTF-8 ({exc.reason})") from exc
    return parse_csv_text(filename, text, preview_rows)


def parse_csv_file(path: str | Path, preview_rows: int = DEFAULT_PREVIEW_ROWS) -> ParsedTable:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise TableParseError(path.name, str(exc)) from exc
    return parse_csv_bytes(path.name, data, preview_rows)


def parse_csv_files(
    paths: Iterable[str | Path], preview_rows: int = DEFAULT_PREVIEW_ROWS
) -> list[ParsedTable]:
    """Parse several files, preserving input order."""
    return [parse_csv_file(path, preview_rows) for path in paths]
