"""Remote executor protocol."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..models import ExecuteOptions, StoredProcedureResponse


@runtime_checkable
class StoredProcedureExecutor(Protocol):
    """Executes a stored procedure against one partition.

    Implementations return the raw payload and request charge on success and
    raise StoredProcedureError (status, sub-status, retry hint) on failure.
    Any other exception is treated as fatal by the reader.
    """

    async def execute(
        self,
        sproc_link: str,
        options: ExecuteOptions,
        args: list[Any],
    ) -> StoredProcedureResponse:
        """Run the stored procedure and return its raw response."""
        ...
