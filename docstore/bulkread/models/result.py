"""Bulk read result model."""

from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class BulkReadResult(BaseModel):
    """Immutable summary of a finished bulk read.

    May describe a single partition or several partitions combined by
    ReadResultAggregator.
    """

    number_of_documents_read: int = Field(default=0, ge=0)
    total_request_units_consumed: float = Field(default=0.0, ge=0)
    total_time_taken: timedelta = timedelta(0)
    failures: tuple[Exception, ...] = ()
    documents_read: tuple[Any, ...] = ()

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def errors(self) -> tuple[Exception, ...]:
        """Failures surfaced while reading, empty if none."""
        return self.failures

    @property
    def succeeded(self) -> bool:
        return not self.failures
