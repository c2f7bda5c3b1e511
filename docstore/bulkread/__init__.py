"""Resilient per-partition bulk reads for a partitioned document store."""

from .core import (
    BulkReadError,
    ErrorClassification,
    ErrorKind,
    PartitionGoneError,
    PartitionReadError,
    PartitionSplitError,
    ReadCancelledError,
    ResponseDecodeError,
    RetriesExhaustedError,
    StoredProcedureError,
)
from .models import (
    BulkReadResult,
    ContinuationState,
    ExecuteOptions,
    ReadPage,
    StoredProcedureResponse,
)
from .runtime import (
    PartitionReader,
    ReadPolicy,
    ReadProgress,
    ReadResultAggregator,
    StoredProcedureExecutor,
    classify_error,
    combine_results,
    decode_page,
)
from .runtime.rest import RestStoredProcedureExecutor

__version__ = "0.1.0"

__all__ = [
    # Reader
    "PartitionReader",
    "ReadPolicy",
    "ReadProgress",
    "StoredProcedureExecutor",
    "RestStoredProcedureExecutor",
    # Results
    "BulkReadResult",
    "ReadResultAggregator",
    "combine_results",
    # Paging
    "ContinuationState",
    "ExecuteOptions",
    "ReadPage",
    "StoredProcedureResponse",
    "decode_page",
    # Errors
    "ErrorKind",
    "ErrorClassification",
    "classify_error",
    "BulkReadError",
    "StoredProcedureError",
    "ResponseDecodeError",
    "PartitionReadError",
    "PartitionGoneError",
    "PartitionSplitError",
    "RetriesExhaustedError",
    "ReadCancelledError",
]
