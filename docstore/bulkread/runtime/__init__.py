"""Partition read runtime.

Architecture:
    - classifier.py: Remote execution error classification
    - decoder.py: Stored procedure payload decoding
    - driver.py: PartitionReader, the per-partition pagination loop
    - progress.py: Thread-safe progress snapshots
    - aggregator.py: BulkReadResult assembly and combination
    - policy.py: Paging and retry bounds
    - telemetry.py: Structured logging
    - rest/: aiohttp stored procedure executor
"""

from __future__ import annotations

from .aggregator import ReadResultAggregator, combine_results
from .classifier import classify_error
from .decoder import decode_page
from .driver import PartitionReader
from .policy import DEFAULT_PAGE_SIZE_HINT, ReadPolicy
from .progress import ProgressTracker, ReadProgress
from .protocols import StoredProcedureExecutor

__all__ = [
    "DEFAULT_PAGE_SIZE_HINT",
    "PartitionReader",
    "ProgressTracker",
    "ReadPolicy",
    "ReadProgress",
    "ReadResultAggregator",
    "StoredProcedureExecutor",
    "classify_error",
    "combine_results",
    "decode_page",
]
