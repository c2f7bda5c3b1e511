"""Remote execution error classification."""

from __future__ import annotations

from datetime import timedelta

from ..core import status
from ..core.enums import ErrorClassification, ErrorKind
from ..core.exceptions import StoredProcedureError


def classify_error(error: BaseException) -> ErrorClassification:
    """Map a remote execution error to the reader's reaction.

    Args:
        error: Exception raised by the stored procedure executor

    Returns:
        ErrorClassification. THROTTLED carries the server retry hint (zero when
        absent, never negative); FATAL carries the original error.
    """
    if not isinstance(error, StoredProcedureError):
        return ErrorClassification(ErrorKind.FATAL, cause=error)

    if error.status_code == status.TOO_MANY_REQUESTS:
        retry_after = error.retry_after or timedelta(0)
        return ErrorClassification(
            ErrorKind.THROTTLED,
            retry_after=max(retry_after, timedelta(0)),
            cause=error,
        )

    if error.status_code == status.REQUEST_TIMEOUT:
        return ErrorClassification(ErrorKind.TRANSIENT_TIMEOUT, cause=error)

    if error.status_code == status.GONE:
        if error.sub_status_code in status.SPLIT_SUB_STATUS_CODES:
            return ErrorClassification(ErrorKind.MOVED_SPLIT, cause=error)
        return ErrorClassification(ErrorKind.MOVED_OTHER, cause=error)

    return ErrorClassification(ErrorKind.FATAL, cause=error)
