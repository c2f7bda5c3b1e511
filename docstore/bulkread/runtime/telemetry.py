"""Structured logging for partition reads.

This module provides telemetry hooks for the partition reader, emitting
structured log records whose fields travel in ``extra``.
"""

from __future__ import annotations

import logging

from ..models import BulkReadResult, ReadPage

logger = logging.getLogger(__name__)

_SNIPPET_LENGTH = 200


def log_partition_read_started(
    *,
    partition_key_range_id: str,
    sproc_link: str,
    page_size_hint: int,
) -> None:
    """Log the start of a partition read."""
    logger.debug(
        "partition_read_started",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "sproc_link": sproc_link,
            "page_size_hint": page_size_hint,
        },
    )


def log_raw_response(*, partition_key_range_id: str, payload: str | None) -> None:
    """Log the raw stored procedure payload, truncated."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(
        "partition_raw_response",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "payload": None if payload is None else payload[:_SNIPPET_LENGTH],
            "payload_length": 0 if payload is None else len(payload),
        },
    )


def log_page_read(
    *,
    partition_key_range_id: str,
    page_index: int,
    page: ReadPage,
    latency_ms: float | None = None,
) -> None:
    """Log one decoded page.

    Args:
        partition_key_range_id: Partition identifier
        page_index: Zero-based index of the page within the read
        page: Decoded page
        latency_ms: Round-trip latency of the request in milliseconds
    """
    logger.debug(
        "partition_page_read",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "page_index": page_index,
            "documents": page.document_count,
            "request_charge": page.request_charge,
            "completion_code": page.completion_code,
            "latency_ms": latency_ms,
        },
    )
    if page.has_anomaly:
        logger.warning(
            "partition_page_anomaly",
            extra={
                "partition_key_range_id": partition_key_range_id,
                "page_index": page_index,
                "completion_code": page.completion_code,
            },
        )


def log_empty_response(*, partition_key_range_id: str, consecutive: int) -> None:
    """Log a blank stored procedure response."""
    logger.warning(
        "partition_empty_response",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "consecutive": consecutive,
        },
    )


def log_throttled(
    *,
    partition_key_range_id: str,
    retry_after_ms: float,
    consecutive: int,
) -> None:
    """Log a throttled request and the backoff about to be applied."""
    logger.debug(
        "partition_throttled",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "retry_after_ms": retry_after_ms,
            "consecutive": consecutive,
        },
    )


def log_timed_out(*, partition_key_range_id: str, consecutive: int) -> None:
    """Log a timed out request."""
    logger.debug(
        "partition_timed_out",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "consecutive": consecutive,
        },
    )


def log_read_failed(
    *,
    partition_key_range_id: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log an unrecoverable partition read failure."""
    logger.error(
        "partition_read_failed",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_read_cancelled(*, partition_key_range_id: str, pages_read: int) -> None:
    logger.info(
        "partition_read_cancelled",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "pages_read": pages_read,
        },
    )


def log_read_completed(
    *,
    partition_key_range_id: str,
    result: BulkReadResult,
    pages_read: int,
) -> None:
    """Log completion of a partition read."""
    logger.info(
        "partition_read_completed",
        extra={
            "partition_key_range_id": partition_key_range_id,
            "pages_read": pages_read,
            "documents_read": result.number_of_documents_read,
            "request_units_consumed": result.total_request_units_consumed,
            "total_time_ms": result.total_time_taken.total_seconds() * 1000.0,
        },
    )
