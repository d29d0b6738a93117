"""PDF processing module for time-tracking reports.

This module provides:
- Plain-text extraction from report PDFs
- Period and total hours parsing across export format versions
"""

from toggl_reports.pdf.parser import (
    DURATION_PATTERNS,
    PERIOD_FORMATS,
    PeriodFormat,
    parse_duration,
    parse_period,
    parse_report,
    parse_report_text,
)
from toggl_reports.pdf.text import extract_text

__all__ = [
    # Text
    "extract_text",
    # Parser
    "PeriodFormat",
    "PERIOD_FORMATS",
    "DURATION_PATTERNS",
    "parse_period",
    "parse_duration",
    "parse_report",
    "parse_report_text",
]
