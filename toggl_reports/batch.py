"""Batch processing - turns a set of input paths into aggregated records."""

import logging
from pathlib import Path
from typing import Callable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from toggl_reports.aggregator import MonthAggregator
from toggl_reports.errors import DirectoryListingError, ReportParseError
from toggl_reports.models import AggregateRecord, ReportRecord
from toggl_reports.pdf import extract_text, parse_report

logger = logging.getLogger(__name__)


class BatchResult(BaseModel):
    """Outcome of one batch of documents."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    aggregates: list[AggregateRecord] = Field(default_factory=list)
    errors: list[Exception] = Field(default_factory=list)
    documents: int = 0

    @property
    def records(self) -> list[ReportRecord]:
        """All parsed records, in arrival order."""
        return [record for aggregate in self.aggregates for record in aggregate.records]

    @property
    def total_seconds(self) -> int:
        return sum(aggregate.total_seconds for aggregate in self.aggregates)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)


def _is_pdf_file(path: Path) -> bool:
    """Check if the path is a PDF file (case insensitive)."""
    return path.suffix.lower() == ".pdf"


def iter_documents(paths: Iterable[Path | str]) -> Iterator[Path]:
    """
    Yield report documents from files and directories, in order.

    Directories are listed one level deep in name order; nested directories
    and non-PDF files are skipped.

    Raises:
        DirectoryListingError: If a directory cannot be listed.
    """
    for path in paths:
        path = Path(path)

        if not path.is_dir():
            yield path
            continue

        try:
            entries = sorted(path.iterdir())
        except OSError as e:
            raise DirectoryListingError(path, e) from e

        for entry in entries:
            if entry.is_dir():
                logger.info("'%s' is a directory, skipping nested files", entry)
                continue
            if not _is_pdf_file(entry):
                logger.debug("Skipping non-PDF file %s", entry)
                continue
            yield entry


def process_batch(
    paths: Iterable[Path | str],
    extractor: Callable[[Path], str | None] = extract_text,
    combine: bool = True,
) -> BatchResult:
    """
    Parse every document under the given paths and fold the records by month.

    A document that cannot be parsed is reported in ``errors`` and skipped.
    A directory that cannot be listed ends the batch; aggregates built so far
    are kept.

    Args:
        paths: Report files and/or directories, in processing order.
        extractor: Returns a document's plain text, or None on failure.
        combine: Merge consecutive records of the same month.
    """
    result = BatchResult()
    aggregator = MonthAggregator(combine=combine)

    try:
        for document in iter_documents(paths):
            result.documents += 1
            logger.info("Processing report at %s", document)

            try:
                record = parse_report(document, extractor=extractor)
            except (ReportParseError, FileNotFoundError) as e:
                logger.error("%s", e)
                result.errors.append(e)
                continue

            aggregator.add(record)

    except DirectoryListingError as e:
        logger.error("%s", e)
        result.errors.append(e)

    result.aggregates = aggregator.aggregates
    logger.info(
        "Processed %d documents into %d rows (%d errors)",
        result.documents,
        len(result.aggregates),
        len(result.errors),
    )
    return result
