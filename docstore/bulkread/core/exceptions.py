"""Custom exception hierarchy."""

from __future__ import annotations

from datetime import timedelta


class BulkReadError(Exception):
    """Base exception for all library errors."""

    pass


class StoredProcedureError(BulkReadError):
    """Error returned by the remote stored procedure executor.

    Carries the status/sub-status pair reported by the document store and the
    server-provided retry hint, if any.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        sub_status_code: int | None = None,
        retry_after: timedelta | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.sub_status_code = sub_status_code
        self.retry_after = retry_after


class ResponseDecodeError(BulkReadError):
    """Stored procedure payload could not be decoded into a page."""

    def __init__(self, message: str, payload: str | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class PartitionReadError(BulkReadError):
    """Unrecoverable failure while reading one partition."""

    def __init__(self, message: str, partition_key_range_id: str) -> None:
        super().__init__(message)
        self.partition_key_range_id = partition_key_range_id


class PartitionGoneError(PartitionReadError):
    """Partition no longer lives at its routing address.

    Partition routing must be refreshed before the read is retried.
    """

    pass


class PartitionSplitError(PartitionGoneError):
    """Partition is splitting or has split."""

    pass


class RetriesExhaustedError(PartitionReadError):
    """A retry bound of the read policy was exceeded."""

    def __init__(self, message: str, partition_key_range_id: str, attempts: int) -> None:
        super().__init__(message, partition_key_range_id)
        self.attempts = attempts


class ReadCancelledError(BulkReadError):
    """Read was cancelled before the partition was drained."""

    def __init__(self, message: str, partition_key_range_id: str) -> None:
        super().__init__(message)
        self.partition_key_range_id = partition_key_range_id
