"""Partition read driver.

This module provides the PartitionReader class that drains one partition by
repeatedly executing the bulk read stored procedure, threading the
continuation pair from each page into the next request.

Retry behaviour:
    - Throttled: backoff for at least the server retry hint, reissue the same request
    - Timed out: reissue the same request immediately
    - Blank payload: reissue the same request, bounded by max_empty_responses
    - Partition gone or split: abort, routing must be refreshed by the caller
    - Anything else: abort

Requests for one partition are strictly sequential. Each reader is meant to
run in its own task; backoff suspends only that task.
"""

from __future__ import annotations

import asyncio
from datetime import timedelta
from time import perf_counter
from typing import Any

from ..core.enums import ErrorClassification, ErrorKind
from ..core.exceptions import (
    PartitionGoneError,
    PartitionReadError,
    PartitionSplitError,
    ReadCancelledError,
    ResponseDecodeError,
    RetriesExhaustedError,
)
from ..models import (
    BulkReadResult,
    ContinuationState,
    ExecuteOptions,
    ReadPage,
    StoredProcedureResponse,
)
from .aggregator import ReadResultAggregator
from .classifier import classify_error
from .decoder import decode_page
from .policy import ReadPolicy
from .progress import ProgressTracker, ReadProgress
from .protocols import StoredProcedureExecutor
from .telemetry import (
    log_empty_response,
    log_page_read,
    log_partition_read_started,
    log_read_cancelled,
    log_read_completed,
    log_raw_response,
    log_read_failed,
    log_throttled,
    log_timed_out,
)


class PartitionReader:
    """Reads every document of one partition through the bulk read stored procedure."""

    def __init__(
        self,
        partition_key_range_id: str,
        executor: StoredProcedureExecutor,
        sproc_link: str,
        partition_key_property: str,
        group_by_property: str | None = None,
        *,
        policy: ReadPolicy | None = None,
    ) -> None:
        """Initialize partition reader.

        Args:
            partition_key_range_id: Partition this reader is bound to
            executor: Remote stored procedure executor
            sproc_link: Link of the bulk read stored procedure
            partition_key_property: Partitioning property of the collection
            group_by_property: Property the stored procedure groups results by
            policy: Paging and retry policy (defaults to ReadPolicy())
        """
        self._policy = policy or ReadPolicy()
        self._options = ExecuteOptions(
            partition_key_range_id=partition_key_range_id,
            script_logging_enabled=self._policy.script_logging_enabled,
        )
        self._executor = executor
        self._sproc_link = sproc_link
        self._partition_key_property = partition_key_property
        self._group_by_property = group_by_property
        self._progress = ProgressTracker()
        self._cancel_requested = asyncio.Event()

    @property
    def partition_key_range_id(self) -> str:
        return self._options.partition_key_range_id

    @property
    def partition_key_property(self) -> str:
        return self._partition_key_property

    @property
    def group_by_property(self) -> str | None:
        return self._group_by_property

    @property
    def policy(self) -> ReadPolicy:
        return self._policy

    @property
    def progress(self) -> ReadProgress:
        """Current progress snapshot, safe to read while the read is running."""
        return self._progress.snapshot()

    def cancel(self) -> None:
        """Request cancellation.

        Takes effect at the top of the next iteration or during a throttle
        backoff. Must be called from the reader's event loop; other threads
        should use ``loop.call_soon_threadsafe(reader.cancel)``.
        """
        self._cancel_requested.set()

    async def read_all(self) -> BulkReadResult:
        """Drain the partition.

        A reader may be drained again; progress restarts from zero on each call.

        Returns:
            BulkReadResult with every document read and the total charge

        Raises:
            PartitionSplitError: Partition split while reading
            PartitionGoneError: Partition moved while reading
            RetriesExhaustedError: A retry bound of the policy was exceeded
            PartitionReadError: Decode failure or unclassified executor error
            ReadCancelledError: cancel() was called before the read completed
        """
        pki = self.partition_key_range_id
        start = perf_counter()
        self._progress.reset()
        aggregator = ReadResultAggregator()
        continuation = ContinuationState()
        pages_read = 0
        requests_issued = 0
        throttles = 0
        timeouts = 0
        empty_responses = 0

        log_partition_read_started(
            partition_key_range_id=pki,
            sproc_link=self._sproc_link,
            page_size_hint=self._policy.page_size_hint,
        )

        while True:
            if self._cancel_requested.is_set():
                log_read_cancelled(partition_key_range_id=pki, pages_read=pages_read)
                raise ReadCancelledError(f"pki {pki} read was cancelled", pki)
            self._check_elapsed(start, requests_issued)

            request_start = perf_counter()
            requests_issued += 1
            try:
                response = await self._executor.execute(
                    self._sproc_link, self._options, self._build_args(continuation)
                )
            except Exception as e:
                classification = classify_error(e)
                if not classification.kind.is_retryable:
                    raise self._fail(self._fatal_error(classification)) from e

                if classification.kind == ErrorKind.THROTTLED:
                    throttles += 1
                    self._progress.record_throttle()
                    log_throttled(
                        partition_key_range_id=pki,
                        retry_after_ms=classification.retry_after.total_seconds() * 1000.0,
                        consecutive=throttles,
                    )
                    self._check_budget("throttled", throttles, self._policy.max_throttle_retries, e)
                    await self._backoff(classification.retry_after)
                    continue

                timeouts += 1
                self._progress.record_timeout()
                log_timed_out(partition_key_range_id=pki, consecutive=timeouts)
                self._check_budget("timed out", timeouts, self._policy.max_timeout_retries, e)
                continue

            page = self._decode(response)
            if page is None:
                empty_responses += 1
                self._progress.record_empty_response()
                log_empty_response(partition_key_range_id=pki, consecutive=empty_responses)
                self._check_budget(
                    "received no response", empty_responses, self._policy.max_empty_responses
                )
                continue

            throttles = timeouts = empty_responses = 0
            aggregator.add_page(page)
            self._progress.record_page(page.document_count, page.request_charge)
            continuation = page.continuation
            log_page_read(
                partition_key_range_id=pki,
                page_index=pages_read,
                page=page,
                latency_ms=(perf_counter() - request_start) * 1000.0,
            )
            pages_read += 1

            if page.is_complete:
                break

        result = aggregator.build(timedelta(seconds=perf_counter() - start))
        log_read_completed(partition_key_range_id=pki, result=result, pages_read=pages_read)
        return result

    def _build_args(self, continuation: ContinuationState) -> list[Any]:
        # Last slot is reserved by the stored procedure signature
        return [
            self._group_by_property,
            continuation.key,
            continuation.token,
            self._policy.page_size_hint,
            None,
        ]

    def _decode(self, response: StoredProcedureResponse) -> ReadPage | None:
        log_raw_response(
            partition_key_range_id=self.partition_key_range_id, payload=response.payload
        )
        try:
            return decode_page(response.payload, response.request_charge)
        except ResponseDecodeError as e:
            error = PartitionReadError(
                f"pki {self.partition_key_range_id} failed to decode bulk read response: {e}",
                self.partition_key_range_id,
            )
            raise self._fail(error) from e

    def _fatal_error(self, classification: ErrorClassification) -> PartitionReadError:
        pki = self.partition_key_range_id
        if classification.kind.is_moved:
            if classification.kind == ErrorKind.MOVED_SPLIT:
                return PartitionSplitError(
                    f"pki {pki} is undergoing split, refresh partition routing before retrying",
                    pki,
                )
            return PartitionGoneError(
                f"pki {pki} is gone, refresh partition routing before retrying",
                pki,
            )
        cause = classification.cause
        status_code = getattr(cause, "status_code", None)
        return PartitionReadError(
            f"pki {pki} failed to read page. Exception was {cause!r}. "
            f"Status code was {status_code}",
            pki,
        )

    def _fail(self, error: PartitionReadError) -> PartitionReadError:
        log_read_failed(
            partition_key_range_id=self.partition_key_range_id,
            error_type=type(error).__name__,
            error_message=str(error),
        )
        return error

    def _check_budget(
        self,
        what: str,
        attempts: int,
        limit: int | None,
        cause: BaseException | None = None,
    ) -> None:
        if limit is None or attempts <= limit:
            return
        error = RetriesExhaustedError(
            f"pki {self.partition_key_range_id} {what} {attempts} times in a row, giving up",
            self.partition_key_range_id,
            attempts,
        )
        raise self._fail(error) from cause

    def _check_elapsed(self, start: float, requests_issued: int) -> None:
        max_elapsed = self._policy.max_elapsed
        if max_elapsed is None:
            return
        elapsed = perf_counter() - start
        if elapsed > max_elapsed.total_seconds():
            error = RetriesExhaustedError(
                f"pki {self.partition_key_range_id} exceeded read budget of "
                f"{max_elapsed.total_seconds():.3f}s after {requests_issued} requests",
                self.partition_key_range_id,
                requests_issued,
            )
            raise self._fail(error)

    async def _backoff(self, delay: timedelta) -> None:
        seconds = delay.total_seconds()
        if seconds <= 0:
            return
        # Wakes early on cancel(); the loop then raises ReadCancelledError
        try:
            await asyncio.wait_for(self._cancel_requested.wait(), timeout=seconds)
        except TimeoutError:
            pass
