from __future__ import annotations


class MatchsightError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(MatchsightError):
    """Requested dataset does not exist."""


class IngestionError(MatchsightError):
    """A single file could not be read or parsed into a Table."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Failed to parse {file_name}: {reason}")


class SchemaResolutionError(MatchsightError):
    """A required logical column has no matching header."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required column: {field}")


class MissingColumnsError(MatchsightError):
    """A component was invoked on a table lacking the columns it needs."""

    def __init__(self, columns: list[str]) -> None:
        self.columns = columns
        super().__init__("Table is missing required columns: " + ", ".join(columns))
