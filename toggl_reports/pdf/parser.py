"""Parser for extracting periods and total hours from time-tracking report PDFs."""

import logging
import re
from datetime import date, datetime
from pathlib import Path
from typing import Callable, NamedTuple

from toggl_reports.errors import (
    DurationNotFoundError,
    InvalidPeriodError,
    PeriodNotFoundError,
    ReportParseError,
    TextExtractionError,
)
from toggl_reports.models import Duration, ReportPeriod, ReportRecord
from toggl_reports.pdf.text import extract_text

logger = logging.getLogger(__name__)

MONTHS = {
    "january": 1, "february": 2, "march": 3, "april": 4,
    "may": 5, "june": 6, "july": 7, "august": 8,
    "september": 9, "october": 10, "november": 11, "december": 12,
}

# "oct" -> 10
MONTH_ABBREVIATIONS = {name[:3]: number for name, number in MONTHS.items()}

LONG_DATE_RE = re.compile(r"([A-Za-z]+) (\d{1,2}), (\d{4})")


class PeriodFormat(NamedTuple):
    """One supported period layout: a two-group regex and a date parser."""

    name: str
    pattern: re.Pattern
    parse_date: Callable[[str], date]


def _strptime(date_format: str) -> Callable[[str], date]:
    def parse(value: str) -> date:
        return datetime.strptime(value, date_format).date()

    return parse


def _parse_long_date(value: str) -> date:
    """Parse "October 01, 2019" without depending on the process locale."""
    match = LONG_DATE_RE.fullmatch(value)
    if not match:
        raise ValueError(f"not a long date: {value!r}")

    month_name, day, year = match.groups()
    month_name = month_name.lower()
    month = MONTHS.get(month_name) or MONTH_ABBREVIATIONS.get(month_name)
    if month is None:
        raise ValueError(f"unknown month: {month_name!r}")

    return date(int(year), month, int(day))


# Tried in order; the first pattern found anywhere in the text wins.
PERIOD_FORMATS: tuple[PeriodFormat, ...] = (
    # 2015-11-01 - 2015-11-30
    PeriodFormat(
        "iso",
        re.compile(r"(\d{4}-\d{2}-\d{2}) - (\d{4}-\d{2}-\d{2})"),
        _strptime("%Y-%m-%d"),
    ),
    # October 01, 2019 – October 15, 2019 (en dash)
    PeriodFormat(
        "long",
        re.compile(r"([A-Za-z]+ \d{1,2}, \d{4}) – ([A-Za-z]+ \d{1,2}, \d{4})"),
        _parse_long_date,
    ),
    # 03/16/2020 – 03/31/2020 (en dash)
    PeriodFormat(
        "us",
        re.compile(r"(\d{2}/\d{2}/\d{4}) – (\d{2}/\d{2}/\d{4})"),
        _strptime("%m/%d/%Y"),
    ),
    # 16-07-2021 - 31-07-2021 (hyphen or en dash)
    PeriodFormat(
        "european",
        re.compile(r"(\d{2}-\d{2}-\d{4}) [-–] (\d{2}-\d{2}-\d{4})"),
        _strptime("%d-%m-%Y"),
    ),
)

# Tried in order; missing groups default to 0.
DURATION_PATTERNS: tuple[re.Pattern, ...] = (
    # Total 12 h 30 min
    re.compile(r"Total (\d+) h (\d+) min"),
    # TOTAL HOURS: 12:30:15
    re.compile(r"TOTAL HOURS: (\d+):(\d+):(\d+)"),
)


def parse_period(
    text: str,
    formats: tuple[PeriodFormat, ...] = PERIOD_FORMATS,
) -> ReportPeriod | None:
    """
    Extract the report period from report text.

    Args:
        text: Plain text of the report.
        formats: Period layouts to try, in priority order.

    Returns:
        The period of the first matching layout, or None if none matches.

    Raises:
        InvalidPeriodError: If a layout matches but its dates do not parse.
    """
    for period_format in formats:
        match = period_format.pattern.search(text)
        if not match:
            continue

        start_string, end_string = match.group(1), match.group(2)
        try:
            period = ReportPeriod(
                start_date=period_format.parse_date(start_string),
                end_date=period_format.parse_date(end_string),
            )
        except ValueError as e:
            raise InvalidPeriodError(
                f"Invalid {period_format.name} period {start_string!r} - {end_string!r}: {e}"
            ) from e

        logger.debug(
            "Found %s period: %s - %s",
            period_format.name,
            period.start_date,
            period.end_date,
        )
        return period

    return None


def parse_duration(
    text: str,
    patterns: tuple[re.Pattern, ...] = DURATION_PATTERNS,
) -> Duration | None:
    """
    Extract total hours from report text.

    Looks for patterns like:
    - "Total 12 h 30 min"
    - "TOTAL HOURS: 12:30:15"
    """
    for pattern in patterns:
        match = pattern.search(text)
        if not match:
            continue

        values = [int(group) if group else 0 for group in match.groups()]
        values += [0] * (3 - len(values))
        duration = Duration(hours=values[0], minutes=values[1], seconds=values[2])
        logger.debug("Found total hours: %s (pattern: %s)", duration, pattern.pattern)
        return duration

    return None


def parse_report_text(text: str, path: Path | str | None = None) -> ReportRecord:
    """
    Build a report record from report text.

    Args:
        text: Plain text of the report.
        path: Source document, used in errors and on the record.

    Raises:
        PeriodNotFoundError: If no period can be parsed.
        DurationNotFoundError: If no total hours can be parsed.
    """
    try:
        period = parse_period(text)
    except InvalidPeriodError as e:
        logger.debug("Rejecting period in %s: %s", path, e)
        raise PeriodNotFoundError(path) from e

    if period is None:
        raise PeriodNotFoundError(path)

    duration = parse_duration(text)
    if duration is None:
        raise DurationNotFoundError(path)

    return ReportRecord(
        period=period,
        duration=duration,
        source=Path(path) if path is not None else None,
    )


def parse_report(
    pdf_path: Path | str,
    extractor: Callable[[Path], str | None] = extract_text,
) -> ReportRecord:
    """
    Extract a report record from a time-tracking report PDF.

    Args:
        pdf_path: Path to the report PDF file.
        extractor: Returns the document's plain text, or None on failure.

    Returns:
        ReportRecord with the parsed period and total hours.

    Raises:
        ReportParseError: If the text, period or hours cannot be extracted.
        FileNotFoundError: If the PDF file doesn't exist.
    """
    pdf_path = Path(pdf_path)

    if not pdf_path.exists():
        raise FileNotFoundError(f"Report PDF not found: {pdf_path}")

    try:
        text = extractor(pdf_path)
        if not text:
            raise TextExtractionError(pdf_path)

        record = parse_report_text(text, pdf_path)

    except ReportParseError:
        raise
    except Exception as e:
        logger.error("Failed to parse report %s: %s", pdf_path, e)
        raise TextExtractionError(pdf_path) from e

    logger.info("Parsed report %s: %s", pdf_path.name, record)
    return record
