"""Month-based combination of consecutive report records."""

import logging
from typing import Iterable

from toggl_reports.models import AggregateRecord, ReportRecord

logger = logging.getLogger(__name__)


class MonthAggregator:
    """Folds each new record into the last aggregate while they share a month.

    Only the most recently added aggregate is ever compared, so records of
    the same month separated by another month stay apart.
    """

    def __init__(self, combine: bool = True) -> None:
        self.combine = combine
        self._aggregates: list[AggregateRecord] = []

    def __len__(self) -> int:
        return len(self._aggregates)

    @property
    def aggregates(self) -> list[AggregateRecord]:
        return list(self._aggregates)

    def reset(self) -> None:
        self._aggregates = []

    def add(self, record: ReportRecord) -> AggregateRecord:
        """
        Add a record, merging it into the last aggregate when possible.

        Returns:
            The aggregate the record ended up in.
        """
        if self.combine and self._aggregates:
            last = self._aggregates[-1]
            if last.seed_record.same_month_as(record):
                last.add(record)
                logger.debug(
                    "Combined %s into %s (%d records)",
                    record.period_string,
                    last.period_string,
                    len(last.records),
                )
                return last

        aggregate = AggregateRecord.seed(record)
        self._aggregates.append(aggregate)
        return aggregate


def fold(records: Iterable[ReportRecord], combine: bool = True) -> list[AggregateRecord]:
    """Fold records, in order, into a list of aggregates."""
    aggregator = MonthAggregator(combine=combine)
    for record in records:
        aggregator.add(record)
    return aggregator.aggregates
