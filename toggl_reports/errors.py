"""Errors raised while turning report documents into records."""

from pathlib import Path


class ReportParseError(Exception):
    """Error raised when a report document cannot be turned into a record."""

    message = "Unable to parse report"

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(f"{self.message} in {self.path}" if self.path else self.message)


class PeriodNotFoundError(ReportParseError):
    """No supported period layout was found in the report text."""

    message = "Unable to parse period dates"


class DurationNotFoundError(ReportParseError):
    """No supported total hours layout was found in the report text."""

    message = "Unable to parse hours"


class TextExtractionError(ReportParseError):
    """The PDF yielded no text at all."""

    message = "Could not get text from PDF"


class InvalidPeriodError(ValueError):
    """A period layout matched but its dates are not valid calendar dates."""

    pass


class DirectoryListingError(Exception):
    """Error raised when an input directory cannot be listed."""

    def __init__(self, path: Path | str, cause: Exception) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Unable to list directory {self.path}: {cause}")
