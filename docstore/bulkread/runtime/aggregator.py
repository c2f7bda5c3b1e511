"""Bulk read result assembly.

ReadResultAggregator collects pages (or whole results from several partition
readers) and produces one immutable BulkReadResult. Partitions own disjoint
data, so combining is a plain sum of counts and charges plus concatenation of
documents and failures.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from ..models import BulkReadResult, ReadPage


class ReadResultAggregator:
    """Accumulates read output and builds a BulkReadResult."""

    def __init__(self) -> None:
        self._documents: list[Any] = []
        self._number_of_documents = 0
        self._request_units = 0.0
        self._failures: list[Exception] = []
        self._time_taken = timedelta(0)

    @property
    def number_of_documents_read(self) -> int:
        return self._number_of_documents

    @property
    def total_request_units_consumed(self) -> float:
        return self._request_units

    def add_page(self, page: ReadPage) -> None:
        """Append a decoded page's documents and charge."""
        self._documents.extend(page.documents)
        self._number_of_documents += page.document_count
        self._request_units += page.request_charge

    def add_result(self, result: BulkReadResult) -> None:
        """Fold a finished result into this aggregate.

        Time taken is the longest of the added results, since partition
        readers run concurrently.
        """
        self._documents.extend(result.documents_read)
        self._number_of_documents += result.number_of_documents_read
        self._request_units += result.total_request_units_consumed
        self._failures.extend(result.failures)
        self._time_taken = max(self._time_taken, result.total_time_taken)

    def add_failure(self, error: Exception) -> None:
        """Record a failure surfaced by a partition reader."""
        self._failures.append(error)

    def build(self, total_time_taken: timedelta | None = None) -> BulkReadResult:
        """Snapshot the aggregate.

        Args:
            total_time_taken: Elapsed time to report (defaults to the longest
                time among added results)

        Returns:
            Immutable BulkReadResult
        """
        return BulkReadResult(
            number_of_documents_read=self._number_of_documents,
            total_request_units_consumed=self._request_units,
            total_time_taken=self._time_taken if total_time_taken is None else total_time_taken,
            failures=tuple(self._failures),
            documents_read=tuple(self._documents),
        )


def combine_results(
    *results: BulkReadResult, total_time_taken: timedelta | None = None
) -> BulkReadResult:
    """Combine results of several partition reads into one."""
    aggregator = ReadResultAggregator()
    for result in results:
        aggregator.add_result(result)
    return aggregator.build(total_time_taken)
