"""aiohttp-backed stored procedure executor."""

from __future__ import annotations

import asyncio
import json
import logging
import math
from datetime import timedelta
from email.utils import formatdate
from typing import Any

import aiohttp

from ...core import status
from ...core.exceptions import StoredProcedureError
from ...models import ExecuteOptions, StoredProcedureResponse
from .auth import build_master_key_authorization

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = "2018-12-31"


class RestStoredProcedureExecutor:
    """Executes stored procedures over the document store REST API.

    Success returns the raw response body and the x-ms-request-charge header.
    Error statuses raise StoredProcedureError carrying the status, sub-status
    and retry hint headers. A client-side timeout is reported as a request
    timeout so the reader retries it.
    """

    def __init__(
        self,
        endpoint: str,
        master_key: str,
        *,
        timeout: float = 60.0,
        api_version: str = DEFAULT_API_VERSION,
    ) -> None:
        self.endpoint = endpoint.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.api_version = api_version
        self._master_key = master_key
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_headers(self, sproc_link: str, options: ExecuteOptions) -> dict[str, str]:
        date = formatdate(usegmt=True)
        resource_link = sproc_link.strip("/")
        return {
            "Authorization": build_master_key_authorization(
                "POST", "sprocs", resource_link, date, self._master_key
            ),
            "x-ms-date": date,
            "x-ms-version": self.api_version,
            "Content-Type": "application/json",
            "Accept": "application/json",
            status.PARTITION_KEY_RANGE_ID_HEADER: options.partition_key_range_id,
            status.SCRIPT_LOGGING_HEADER: "true" if options.script_logging_enabled else "false",
        }

    async def execute(
        self,
        sproc_link: str,
        options: ExecuteOptions,
        args: list[Any],
    ) -> StoredProcedureResponse:
        """POST the argument array to the stored procedure."""
        url = f"{self.endpoint}/{sproc_link.strip('/')}"
        headers = self.build_headers(sproc_link, options)
        try:
            async with self.session.post(url, data=json.dumps(args), headers=headers) as response:
                body = await response.text()
                if response.status >= 400:
                    raise self._to_error(response.status, response.headers, body)
                return StoredProcedureResponse(
                    payload=body,
                    request_charge=_parse_request_charge(
                        response.headers.get(status.REQUEST_CHARGE_HEADER)
                    ),
                )
        except asyncio.TimeoutError as e:
            raise StoredProcedureError(
                f"Request to {url} timed out",
                status_code=status.REQUEST_TIMEOUT,
            ) from e

    def _to_error(self, status_code: int, headers: Any, body: str) -> StoredProcedureError:
        sub_status = headers.get(status.SUB_STATUS_HEADER)
        retry_after_ms = headers.get(status.RETRY_AFTER_MS_HEADER)
        retry_after = None
        if retry_after_ms is not None:
            millis = _parse_non_negative(retry_after_ms)
            if millis is None:
                logger.warning(
                    "invalid_response_header",
                    extra={"header": status.RETRY_AFTER_MS_HEADER, "value": retry_after_ms},
                )
            else:
                retry_after = timedelta(milliseconds=millis)
        logger.debug(
            "stored_procedure_error",
            extra={
                "status_code": status_code,
                "sub_status_code": sub_status,
                "retry_after_ms": retry_after_ms,
            },
        )
        return StoredProcedureError(
            _error_message(status_code, body),
            status_code=status_code,
            sub_status_code=int(sub_status) if sub_status and sub_status.isdigit() else None,
            retry_after=retry_after,
        )

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> RestStoredProcedureExecutor:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _parse_non_negative(value: str) -> float | None:
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed) or parsed < 0:
        return None
    return parsed


def _parse_request_charge(value: str | None) -> float:
    """Parse the request charge header, falling back to 0 when absent or invalid."""
    if value is None or not value.strip():
        return 0.0
    charge = _parse_non_negative(value)
    if charge is None:
        logger.warning(
            "invalid_response_header",
            extra={"header": status.REQUEST_CHARGE_HEADER, "value": value},
        )
        return 0.0
    return charge


def _error_message(status_code: int, body: str) -> str:
    try:
        parsed = json.loads(body) if body else None
    except ValueError:
        parsed = None
    if isinstance(parsed, dict) and parsed.get("message"):
        return f"HTTP {status_code}: {parsed['message']}"
    return f"HTTP {status_code}: {body[:200]}" if body else f"HTTP {status_code}"
