"""
HTTP client for the live backend.

Maps every outcome onto the response envelope:
- 2xx with an envelope body: passed through (UNKNOWN_ERROR if it does not validate)
- 2xx with any other body: wrapped as success data
- HTTP error status: code is the status code, message comes from the body
- no response at all (connection, timeout): UNKNOWN_ERROR
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from cardsmith.models.response import STANDARD_MESSAGES, ApiResponse, ErrorCode

logger = logging.getLogger(__name__)


class LiveApiClient:
    """Thin async wrapper over ``httpx.AsyncClient`` returning envelopes."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "LiveApiClient":
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        await self.aclose()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> ApiResponse:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> ApiResponse:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> ApiResponse:
        return await self.request("PUT", path, json=json)

    async def delete(self, path: str) -> ApiResponse:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> ApiResponse:
        """Send one request and fold the outcome into an envelope."""
        query = {key: value for key, value in (params or {}).items() if value is not None}

        try:
            response = await self._client.request(method, path, params=query or None, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "live_api_error_status",
                extra={"method": method, "path": path, "status": exc.response.status_code},
            )
            return ApiResponse.failure(
                str(exc.response.status_code),
                _error_message(exc.response),
            )
        except httpx.RequestError as exc:
            logger.warning(
                "live_api_unreachable",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            return ApiResponse.failure(ErrorCode.UNKNOWN_ERROR)

        body = _decode_body(response)
        if not ApiResponse.is_envelope(body):
            return ApiResponse.ok(body)
        try:
            return ApiResponse.model_validate(body)
        except ValidationError as exc:
            logger.warning(
                "live_api_malformed_envelope",
                extra={"method": method, "path": path, "error_count": exc.error_count()},
            )
            return ApiResponse.failure(
                ErrorCode.UNKNOWN_ERROR,
                "Backend returned a malformed response envelope",
            )


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(response: httpx.Response) -> str:
    """Best-effort human-readable message from an error response."""
    body = _decode_body(response)
    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            return str(body["message"])
        error = body.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return str(error["message"])
        if isinstance(body.get("detail"), str):
            return str(body["detail"])
    return STANDARD_MESSAGES[ErrorCode.UNKNOWN_ERROR]
