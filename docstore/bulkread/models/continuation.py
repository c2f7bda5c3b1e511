"""Continuation state threaded between page requests."""

from pydantic import BaseModel, ConfigDict


class ContinuationState(BaseModel):
    """Cursor pair returned by a page and sent with the next request.

    Both values are None for the first request of a partition. A decoded page
    always replaces the whole pair; the two halves are never mixed across pages.
    """

    key: str | None = None
    token: str | None = None

    model_config = ConfigDict(frozen=True)
