"""Column fingerprint and match result models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class DataType(StrEnum):
    BOOLEAN = "boolean"
    STRING = "string"
    NUMBER = "number"
    MIXED = "mixed"


class ColumnFingerprint(BaseModel):
    """Compact, content-addressed descriptor of a single table column.

    Serialised field names follow the camelCase record layout
    (``sampleValues``, ``dataType``, ...) so stored fingerprints stay
    interchangeable with other consumers; snake_case is accepted on input.
    """

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "serialize_by_alias": True,
    }

    id: str
    name: str
    position: int = Field(ge=0)
    sample_values: list[str] = Field(default_factory=list, max_length=10)
    data_type: DataType = DataType.STRING
    unique_values: int = Field(default=0, ge=0)
    null_count: int = Field(default=0, ge=0)


class MatchResult(BaseModel):
    """Best column found for a target fingerprint in a pool of tables."""

    model_config = {"populate_by_name": True, "alias_generator": to_camel, "serialize_by_alias": True}

    filename: str
    column: str
    position: int
    match_score: float
    fingerprint: ColumnFingerprint
