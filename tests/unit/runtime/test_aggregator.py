"""Unit tests for result aggregation."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from docstore.bulkread.models import BulkReadResult, ContinuationState, ReadPage
from docstore.bulkread.runtime import ReadResultAggregator, combine_results


class TestReadResultAggregator:
    """Test ReadResultAggregator."""

    def test_empty_aggregate(self):
        """Test building with nothing added."""
        result = ReadResultAggregator().build()

        assert result.number_of_documents_read == 0
        assert result.total_request_units_consumed == 0.0
        assert result.total_time_taken == timedelta(0)
        assert result.succeeded

    def test_add_pages(self):
        """Test pages are summed and concatenated in order."""
        aggregator = ReadResultAggregator()
        aggregator.add_page(
            ReadPage(
                documents=({"id": 1}, {"id": 2}),
                continuation=ContinuationState(key="pk1", token="tok1"),
                completion_code=0,
                request_charge=4.5,
            )
        )
        aggregator.add_page(ReadPage(documents=({"id": 3},), completion_code=1, request_charge=1.5))

        assert aggregator.number_of_documents_read == 3
        assert aggregator.total_request_units_consumed == pytest.approx(6.0)
        result = aggregator.build(timedelta(seconds=2))
        assert result.documents_read == ({"id": 1}, {"id": 2}, {"id": 3})
        assert result.total_time_taken == timedelta(seconds=2)

    def test_add_failure(self):
        """Test failures are carried into the result."""
        aggregator = ReadResultAggregator()
        error = RuntimeError("partition 3 failed")
        aggregator.add_failure(error)
        result = aggregator.build()

        assert result.failures == (error,)
        assert result.errors == (error,)
        assert not result.succeeded


class TestCombineResults:
    """Test combine_results."""

    def test_elementwise_sum(self):
        """Test counts and charges sum, documents and failures concatenate."""
        failure = ValueError("b failed")
        a = BulkReadResult(
            number_of_documents_read=2,
            total_request_units_consumed=10.0,
            total_time_taken=timedelta(seconds=3),
            documents_read=("a1", "a2"),
        )
        b = BulkReadResult(
            number_of_documents_read=1,
            total_request_units_consumed=2.5,
            total_time_taken=timedelta(seconds=5),
            failures=(failure,),
            documents_read=("b1",),
        )
        combined = combine_results(a, b)

        assert combined.number_of_documents_read == 3
        assert combined.total_request_units_consumed == pytest.approx(12.5)
        assert combined.documents_read == ("a1", "a2", "b1")
        assert combined.failures == (failure,)
        assert combined.total_time_taken == timedelta(seconds=5)

    def test_explicit_total_time(self):
        """Test an explicit total time overrides the longest result."""
        combined = combine_results(
            BulkReadResult(total_time_taken=timedelta(seconds=1)),
            total_time_taken=timedelta(seconds=9),
        )
        assert combined.total_time_taken == timedelta(seconds=9)

    def test_result_is_immutable(self):
        """Test results cannot be mutated after construction."""
        result = combine_results()
        with pytest.raises(ValidationError):
            result.number_of_documents_read = 5
