"""Heuristic data-type classification for cleaned column values."""

from __future__ import annotations

import re
from typing import Sequence

from billmatch.models.fingerprint import DataType

BOOLEAN_PATTERN = re.compile(
    r"yes|no|true|false|1|0|y|n|approved|rejected|pending", re.IGNORECASE
)
# ASCII digits only; no exponents or thousands separators
NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")

DOMINANT_RATIO = 0.8
MIXED_RATIO = 0.3


def is_boolean_like(value: str) -> bool:
    return BOOLEAN_PATTERN.fullmatch(value) is not None


def is_number_like(value: str) -> bool:
    return NUMBER_PATTERN.fullmatch(value) is not None


def classify_values(values: Sequence[str]) -> DataType:
    """Classify cleaned, non-empty values into a DataType.

    Boolean and number ratios are counted independently, so "1" and "0"
    contribute to both. Thresholds are strict: a ratio of exactly 0.8 does
    not make a type dominant.
    """
    if not values:
        return DataType.STRING

    boolean_count = sum(1 for value in values if is_boolean_like(value))
    number_count = sum(1 for value in values if is_number_like(value))

    total = len(values)
    boolean_ratio = boolean_count / total
    number_ratio = number_count / total

    if boolean_ratio > DOMINANT_RATIO:
        return DataType.BOOLEAN
    if number_ratio > DOMINANT_RATIO:
        return DataType.NUMBER
    if boolean_ratio > MIXED_RATIO or number_ratio > MIXED_RATIO:
        return DataType.MIXED
    return DataType.STRING
