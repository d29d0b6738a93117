"""Data models for parsed time-tracking reports."""

from datetime import date
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from toggl_reports.formatting import (
    END_DATE_UNDEFINED,
    START_DATE_UNDEFINED,
    decimal_hours,
    format_date,
    format_duration,
    split_seconds,
)


class ReportPeriod(BaseModel):
    """Calendar date range a report covers (UTC calendar, no time of day)."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date  # not guaranteed to be >= start_date

    @property
    def start_month(self) -> tuple[int, int]:
        """(year, month) of the start date."""
        return self.start_date.year, self.start_date.month

    @property
    def belongs_to_one_month(self) -> bool:
        """True if start and end fall in the same calendar month."""
        return self.start_month == (self.end_date.year, self.end_date.month)


class Duration(BaseModel):
    """Elapsed billable time."""

    model_config = ConfigDict(frozen=True)

    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0)
    seconds: int = Field(default=0, ge=0)

    @classmethod
    def from_seconds(cls, total_seconds: int) -> "Duration":
        hours, minutes, seconds = split_seconds(total_seconds)
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @property
    def total_seconds(self) -> int:
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    @property
    def decimal_hours(self) -> float:
        return decimal_hours(self.total_seconds)


class _RecordDisplay:
    """Display properties shared by single and aggregated records.

    Subclasses provide ``period``, ``duration`` and ``total_seconds``.
    """

    @property
    def total_decimal_hours(self) -> float:
        return decimal_hours(self.total_seconds)

    @property
    def period_start_string(self) -> str:
        start = self.period.start_date if self.period else None
        return format_date(start, START_DATE_UNDEFINED)

    @property
    def period_end_string(self) -> str:
        end = self.period.end_date if self.period else None
        return format_date(end, END_DATE_UNDEFINED)

    @property
    def period_string(self) -> str:
        return f"{self.period_start_string} - {self.period_end_string}"

    @property
    def total_hours_string(self) -> str:
        if self.duration is None:
            return format_duration(None)
        return format_duration(self.total_seconds)

    def __str__(self) -> str:
        return f"Period: {self.period_string}, total hours: {self.total_hours_string}"


class ReportRecord(_RecordDisplay, BaseModel):
    """One successfully parsed report document."""

    model_config = ConfigDict(frozen=True)

    period: ReportPeriod | None = None
    duration: Duration | None = None
    source: Path | None = None

    @property
    def total_seconds(self) -> int:
        """Total seconds, 0 when the duration is undefined."""
        return self.duration.total_seconds if self.duration else 0

    def same_month_as(self, other: "ReportRecord") -> bool:
        """True if both periods are defined and start in the same year and month."""
        if self.period is None or other.period is None:
            return False
        return self.period.start_month == other.period.start_month


class AggregateRecord(_RecordDisplay, BaseModel):
    """One or more same-month records folded into a single reported row.

    The period is always the seed record's period; it is not widened when
    later records are added.
    """

    records: list[ReportRecord] = Field(min_length=1)

    @classmethod
    def seed(cls, record: ReportRecord) -> "AggregateRecord":
        return cls(records=[record])

    def add(self, record: ReportRecord) -> None:
        """Append a constituent record in arrival order."""
        self.records.append(record)

    @property
    def seed_record(self) -> ReportRecord:
        return self.records[0]

    @property
    def period(self) -> ReportPeriod | None:
        return self.seed_record.period

    @property
    def total_seconds(self) -> int:
        return sum(record.total_seconds for record in self.records)

    @property
    def duration(self) -> Duration | None:
        if all(record.duration is None for record in self.records):
            return None
        return Duration.from_seconds(self.total_seconds)

    @property
    def is_combined(self) -> bool:
        return len(self.records) > 1
