"""
Request dependencies and envelope-to-HTTP mapping.

Status codes for failure envelopes:
- *_NOT_FOUND: 404
- every other known failure: 400
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from cardsmith.mock_api.apis import MockApis
from cardsmith.models.response import ApiResponse, ErrorCode
from cardsmith.store.store import Store

NOT_FOUND_CODES = frozenset(
    {
        ErrorCode.GAME_NOT_FOUND.value,
        ErrorCode.CARD_NOT_FOUND.value,
        ErrorCode.CARDS_NOT_FOUND.value,
        ErrorCode.DECK_NOT_FOUND.value,
    }
)


def get_apis(request: Request) -> MockApis:
    """Dependency providing the app's mock APIs."""
    apis: MockApis = request.app.state.apis
    return apis


def get_store(request: Request) -> Store:
    """Dependency providing the app's store."""
    store: Store = request.app.state.store
    return store


def envelope_response(
    response: ApiResponse,
    success_status: int = status.HTTP_200_OK,
) -> JSONResponse:
    """Serialize an envelope with the matching HTTP status."""
    if response.success:
        status_code = success_status
    elif response.error is not None and response.error.code in NOT_FOUND_CODES:
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(content=response.to_dict(), status_code=status_code)
