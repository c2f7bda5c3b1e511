"""Data models for bulk reads.

All models are Pydantic v2 and immutable (frozen=True). Documents are kept
as the parsed JSON values returned by the server and never inspected.

Model Categories:
    - Paging: ContinuationState, ReadPage, BulkReadPayload
    - Execution: ExecuteOptions, StoredProcedureResponse
    - Results: BulkReadResult
"""

from .continuation import ContinuationState
from .execution import ExecuteOptions, StoredProcedureResponse
from .page import BulkReadPayload, ReadPage
from .result import BulkReadResult

__all__ = [
    "BulkReadPayload",
    "BulkReadResult",
    "ContinuationState",
    "ExecuteOptions",
    "ReadPage",
    "StoredProcedureResponse",
]
