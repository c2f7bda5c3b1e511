"""Page models for the bulk read stored procedure."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.status import READ_COMPLETE
from .continuation import ContinuationState


class BulkReadPayload(BaseModel):
    """Wire schema of one bulk read stored procedure response."""

    read_results: list[Any] = Field(..., alias="readResults")
    continuation_pk: str | None = Field(default=None, alias="continuationPk")
    continuation_token: str | None = Field(default=None, alias="continuationToken")
    error_code: int = Field(..., alias="errorCode", strict=True)

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ReadPage(BaseModel):
    """One decoded page of a partition read."""

    documents: tuple[Any, ...] = ()
    continuation: ContinuationState = ContinuationState()
    completion_code: int
    request_charge: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def is_complete(self) -> bool:
        """Partition is drained for the current request shape."""
        return self.completion_code == READ_COMPLETE

    @property
    def has_anomaly(self) -> bool:
        """Server reported a completion code worth logging."""
        return self.completion_code > READ_COMPLETE

    @property
    def document_count(self) -> int:
        return len(self.documents)
