"""BillMatch exception hierarchy."""

from __future__ import annotations


class BillMatchError(Exception):
    """Base exception for all BillMatch errors."""


class TableParseError(BillMatchError):
    """An uploaded file could not be parsed into a table."""

    def __init__(self, filename: str, message: str) -> None:
        self.filename = filename
        super().__init__(f"Failed to parse {filename}: {message}")


class EmptyTableError(TableParseError):
    """An uploaded file has a header but no data rows."""

    def __init__(self, filename: str) -> None:
        super().__init__(filename, "file is empty")


class NoTablesError(BillMatchError):
    """Analysis was requested without any tables."""


class ColumnNotFoundError(BillMatchError):
    """A referenced file or column does not exist in the supplied tables."""

    def __init__(self, filename: str, column: str) -> None:
        self.filename = filename
        self.column = column
        super().__init__(f"Column {column!r} not found in {filename!r}")


class ModelProviderError(BillMatchError):
    """The language model call failed."""


class DeploymentNotFoundError(ModelProviderError):
    """The configured model deployment does not exist."""

    def __init__(self, deployment: str) -> None:
        self.deployment = deployment
        super().__init__(f"Model deployment {deployment!r} not found")


class ModelAuthenticationError(ModelProviderError):
    """The model provider rejected the configured credentials."""


class InvalidModelResponseError(ModelProviderError):
    """The model replied with content that does not fit the expected schema."""

    def __init__(self, message: str, raw_response: str = "") -> None:
        self.raw_response = raw_response
        super().__init__(message)
