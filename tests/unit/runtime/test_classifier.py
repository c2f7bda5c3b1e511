"""Unit tests for remote execution error classification."""

from datetime import timedelta

import pytest

from docstore.bulkread.core import ErrorKind, StoredProcedureError
from docstore.bulkread.runtime import classify_error


class TestClassifyError:
    """Test classify_error mapping."""

    def test_throttled_carries_retry_after(self):
        """Test 429 maps to THROTTLED with the server hint."""
        error = StoredProcedureError("busy", status_code=429, retry_after=timedelta(milliseconds=250))
        result = classify_error(error)

        assert result.kind == ErrorKind.THROTTLED
        assert result.retry_after == timedelta(milliseconds=250)
        assert result.cause is error

    def test_throttled_defaults_to_zero(self):
        """Test a missing retry hint becomes zero."""
        result = classify_error(StoredProcedureError("busy", status_code=429))
        assert result.retry_after == timedelta(0)

    def test_throttled_never_negative(self):
        """Test a negative retry hint is clamped to zero."""
        error = StoredProcedureError("busy", status_code=429, retry_after=timedelta(seconds=-3))
        assert classify_error(error).retry_after == timedelta(0)

    def test_request_timeout(self):
        """Test 408 maps to TRANSIENT_TIMEOUT."""
        result = classify_error(StoredProcedureError("slow", status_code=408))
        assert result.kind == ErrorKind.TRANSIENT_TIMEOUT
        assert result.kind.is_retryable

    @pytest.mark.parametrize("sub_status", [1002, 1007])
    def test_gone_with_split_sub_status(self, sub_status):
        """Test 410 with split sub-statuses maps to MOVED_SPLIT."""
        error = StoredProcedureError("gone", status_code=410, sub_status_code=sub_status)
        result = classify_error(error)

        assert result.kind == ErrorKind.MOVED_SPLIT
        assert result.kind.is_moved

    @pytest.mark.parametrize("sub_status", [None, 0, 1000, 1008])
    def test_gone_otherwise(self, sub_status):
        """Test other 410 responses map to MOVED_OTHER."""
        error = StoredProcedureError("gone", status_code=410, sub_status_code=sub_status)
        assert classify_error(error).kind == ErrorKind.MOVED_OTHER

    @pytest.mark.parametrize("status_code", [None, 400, 401, 403, 404, 500, 503])
    def test_other_status_is_fatal(self, status_code):
        """Test remaining statuses map to FATAL with the cause."""
        error = StoredProcedureError("boom", status_code=status_code)
        result = classify_error(error)

        assert result.kind == ErrorKind.FATAL
        assert result.cause is error
        assert not result.kind.is_retryable

    def test_foreign_exception_is_fatal(self):
        """Test non executor exceptions map to FATAL."""
        error = ValueError("unexpected")
        result = classify_error(error)

        assert result.kind == ErrorKind.FATAL
        assert result.cause is error
