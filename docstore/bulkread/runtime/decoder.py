"""Stored procedure response decoding.

Turns one raw payload into a ReadPage. A blank payload decodes to None (the
"no response" case the reader retries), which is distinct from a page that
carries zero documents. Anything else that fails to parse raises
ResponseDecodeError.
"""

from __future__ import annotations

from pydantic import ValidationError

from ..core.exceptions import ResponseDecodeError
from ..models import BulkReadPayload, ContinuationState, ReadPage

_SNIPPET_LENGTH = 200


def decode_page(payload: str | None, request_charge: float) -> ReadPage | None:
    """Decode a stored procedure payload.

    Args:
        payload: Raw response body
        request_charge: Request units reported for the call

    Returns:
        ReadPage, or None when the payload is empty or blank

    Raises:
        ResponseDecodeError: If a non-blank payload is not a valid bulk read response
    """
    if payload is None or not payload.strip():
        return None

    try:
        parsed = BulkReadPayload.model_validate_json(payload)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Malformed bulk read response: {e.error_count()} validation error(s)",
            payload=payload[:_SNIPPET_LENGTH],
        ) from e

    try:
        return ReadPage(
            documents=tuple(parsed.read_results),
            continuation=ContinuationState(
                key=parsed.continuation_pk,
                token=parsed.continuation_token,
            ),
            completion_code=parsed.error_code,
            request_charge=request_charge,
        )
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Invalid request charge {request_charge!r}",
            payload=payload[:_SNIPPET_LENGTH],
        ) from e
