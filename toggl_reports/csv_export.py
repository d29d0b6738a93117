"""CSV export of report records."""

import logging
from pathlib import Path
from typing import Iterable, Protocol

from toggl_reports.formatting import format_decimal_hours

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("Period", "Total Hours", "Decimal Hours")


class RecordLike(Protocol):
    period_start_string: str
    period_end_string: str
    total_hours_string: str
    total_decimal_hours: float


def to_csv(
    records: Iterable[RecordLike],
    separator: str = ";",
    decimal_places: int | None = None,
) -> str:
    """
    Render records as delimited text.

    Output is a header line, a blank line, then one newline-terminated row
    per record in input order. Fields are not quoted.

    Args:
        records: Records or aggregates to render.
        separator: Field separator.
        decimal_places: Fixed precision for decimal hours; None uses the
            shortest round-trip float representation.
    """
    lines = [separator.join(HEADER_FIELDS) + "\n", "\n"]

    for record in records:
        decimal_hours = format_decimal_hours(record.total_decimal_hours, decimal_places)
        lines.append(
            f"{record.period_start_string} - {record.period_end_string}"
            f"{separator}{record.total_hours_string}"
            f"{separator}{decimal_hours}\n"
        )

    return "".join(lines)


def save_csv(csv_text: str, output_path: Path | str) -> Path:
    """
    Write CSV text to a UTF-8 file.

    Returns:
        Path to the written file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="\n") as output_file:
        output_file.write(csv_text)

    logger.info("Saved CSV to %s", output_path)
    return output_path
