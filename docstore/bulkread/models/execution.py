"""Request and response values exchanged with the remote executor."""

from pydantic import BaseModel, ConfigDict, Field


class ExecuteOptions(BaseModel):
    """Routing options for one stored procedure execution."""

    partition_key_range_id: str = Field(..., min_length=1)
    script_logging_enabled: bool = True

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)


class StoredProcedureResponse(BaseModel):
    """Raw result of a successful stored procedure execution.

    Attributes:
        payload: Response body as returned by the server (may be empty)
        request_charge: Request units consumed by the call
    """

    payload: str | None = None
    request_charge: float = Field(default=0.0, ge=0)

    model_config = ConfigDict(frozen=True)
