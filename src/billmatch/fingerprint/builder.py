"""Column fingerprint construction and identity hashing."""

from __future__ import annotations

import hashlib
import json
from typing import Iterable

from billmatch.core.types import RawCell, RawColumn
from billmatch.fingerprint.type_classifier import classify_values
from billmatch.models.fingerprint import ColumnFingerprint, DataType
from billmatch.models.table import TableData

SAMPLE_SIZE = 10
ID_LENGTH = 16


def clean_value(value: RawCell) -> str:
    """Normalise a raw cell: absent becomes empty, then trim and lower-case."""
    return str(value or "").strip().lower()


def compute_fingerprint_id(
    name: str,
    position: int,
    data_type: DataType | str,
    sample_values: Iterable[str],
    unique_values: int,
    null_count: int,
) -> str:
    """Hash the canonical descriptor of a column.

    The descriptor is serialised as compact JSON with sorted keys and sorted
    sample values, so sample order never affects identity.
    """
    descriptor = {
        "name": name.lower(),
        "position": position,
        "dataType": str(data_type),
        "sampleValues": sorted(sample_values),
        "uniqueValues": unique_values,
        "nullCount": null_count,
    }
    payload = json.dumps(descriptor, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:ID_LENGTH]


def build_fingerprint(column_name: str, position: int, values: RawColumn) -> ColumnFingerprint:
    """Characterise a column from its full list of raw values.

    Empty and all-null columns produce a valid fingerprint with
    ``unique_values == 0`` and a ``string`` data type.
    """
    cleaned = [cleaned for cleaned in map(clean_value, values) if cleaned]

    distinct = list(dict.fromkeys(cleaned))
    sample_values = distinct[:SAMPLE_SIZE]
    unique_values = len(distinct)
    null_count = len(values) - len(cleaned)
    data_type = classify_values(cleaned)

    return ColumnFingerprint(
        id=compute_fingerprint_id(
            column_name, position, data_type, sample_values, unique_values, null_count
        ),
        name=column_name,
        position=position,
        sample_values=sample_values,
        data_type=data_type,
        unique_values=unique_values,
        null_count=null_count,
    )


def fingerprint_table(table: TableData) -> list[ColumnFingerprint]:
    """Fingerprint every column of a table in header order."""
    return [
        build_fingerprint(header, index, table.column_values(index))
        for index, header in enumerate(table.headers)
    ]


def verify_fingerprint(fingerprint: ColumnFingerprint) -> bool:
    """True if the fingerprint's id matches its own descriptor fields."""
    return fingerprint.id == compute_fingerprint_id(
        fingerprint.name,
        fingerprint.position,
        fingerprint.data_type,
        fingerprint.sample_values,
        fingerprint.unique_values,
        fingerprint.null_count,
    )
