"""Core components."""

from .enums import ErrorClassification, ErrorKind
from .exceptions import (
    BulkReadError,
    PartitionGoneError,
    PartitionReadError,
    PartitionSplitError,
    ReadCancelledError,
    ResponseDecodeError,
    RetriesExhaustedError,
    StoredProcedureError,
)

__all__ = [
    "ErrorKind",
    "ErrorClassification",
    "BulkReadError",
    "StoredProcedureError",
    "ResponseDecodeError",
    "PartitionReadError",
    "PartitionGoneError",
    "PartitionSplitError",
    "RetriesExhaustedError",
    "ReadCancelledError",
]
