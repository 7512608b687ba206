"""
Response envelope: uniform result shape for every API and service call.

Success:
    {"success": true, "data": ..., "pagination": {...}}   (pagination optional)

Failure:
    {"success": false, "error": {"code": ..., "message": ..., "details": {...}}}
                                                          (details optional)

Callers branch on ``success``. Domain failures are values, never exceptions:
inside the API layer they are raised as ``ApiError`` and converted to a
failure envelope at the boundary.
"""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cardsmith.models.base import CamelModel


class ErrorCode(str, Enum):
    """Error codes carried in failure envelopes."""

    # Missing resources
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    CARD_NOT_FOUND = "CARD_NOT_FOUND"
    CARDS_NOT_FOUND = "CARDS_NOT_FOUND"
    DECK_NOT_FOUND = "DECK_NOT_FOUND"

    # Rejected input
    INVALID_CARDS = "INVALID_CARDS"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_IMPORT = "INVALID_IMPORT"
    IMPORT_ERROR = "IMPORT_ERROR"

    # Transport failure without a status code (live mode only)
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


STANDARD_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.GAME_NOT_FOUND: "Game not found",
    ErrorCode.CARD_NOT_FOUND: "Card not found",
    ErrorCode.CARDS_NOT_FOUND: "None of the specified cards were found",
    ErrorCode.DECK_NOT_FOUND: "Deck not found",
    ErrorCode.INVALID_CARDS: "Some cards in the deck do not exist",
    ErrorCode.INVALID_REQUEST: "Invalid request data",
    ErrorCode.INVALID_IMPORT: "Import data must include a deck name",
    ErrorCode.IMPORT_ERROR: "Failed to process import data",
    ErrorCode.UNKNOWN_ERROR: "An unknown error occurred",
}


class Pagination(CamelModel):
    """Page metadata for list responses."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    @classmethod
    def for_page(cls, page: int, limit: int, total_items: int) -> "Pagination":
        return cls(
            current_page=page,
            total_pages=math.ceil(total_items / limit),
            total_items=total_items,
            items_per_page=limit,
        )


class ErrorDetail(BaseModel):
    """Failure information."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable explanation")
    details: dict[str, Any] | None = Field(
        default=None,
        description="Additional structured detail (optional)",
    )


class ApiResponse(BaseModel):
    """
    Universal response envelope.

    ``data`` holds entity models in mock mode and decoded JSON in live mode;
    ``to_dict()`` yields the same wire shape for both.
    """

    success: bool
    data: Any = None
    pagination: Pagination | None = None
    error: ErrorDetail | None = None

    @classmethod
    def ok(cls, data: Any, pagination: Pagination | None = None) -> "ApiResponse":
        """Create a success response."""
        return cls(success=True, data=data, pagination=pagination)

    @classmethod
    def failure(
        cls,
        code: ErrorCode | str,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> "ApiResponse":
        """
        Create a failure response.

        The message defaults to the standard message for known codes.
        """
        if isinstance(code, ErrorCode):
            message = message or STANDARD_MESSAGES[code]
            code = code.value
        return cls(
            success=False,
            error=ErrorDetail(
                code=code,
                message=message or STANDARD_MESSAGES[ErrorCode.UNKNOWN_ERROR],
                details=details,
            ),
        )

    @staticmethod
    def is_envelope(body: Any) -> bool:
        """True if a decoded JSON body already has the envelope shape."""
        return isinstance(body, dict) and isinstance(body.get("success"), bool)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape, omitting absent optional members."""
        payload = self.model_dump(mode="json", by_alias=True)
        if self.success:
            del payload["error"]
            if self.pagination is None:
                del payload["pagination"]
        else:
            del payload["data"]
            del payload["pagination"]
            if payload["error"]["details"] is None:
                del payload["error"]["details"]
        return payload


class ApiError(Exception):
    """
    A known, explainable failure raised inside the API layer.

    Converted to a failure envelope before it reaches any caller.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.code = code
        self.message = message or STANDARD_MESSAGES[code]
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> ApiResponse:
        return ApiResponse.failure(self.code, self.message, self.details)
