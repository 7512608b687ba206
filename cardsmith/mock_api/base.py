"""
Shared plumbing for the mock entity APIs.

Every public operation is wrapped by ``endpoint``:
1. await the simulated network delay
2. run the operation body synchronously (no await inside it, so the store
   is never left half rewritten across a yield point)
3. convert the outcome into an ``ApiResponse``

Two calls issued concurrently can still interleave at step 1. No lock is
taken; the last writer wins.
"""

import functools
import logging
from collections.abc import Callable, Coroutine, Mapping, Sequence
from typing import Any, Concatenate, ParamSpec, TypeVar

from pydantic import ValidationError

from cardsmith.mock_api.latency import Latency
from cardsmith.models.game import Game
from cardsmith.models.response import ApiError, ApiResponse, ErrorCode, Pagination
from cardsmith.store.store import Store

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")
ApiT = TypeVar("ApiT", bound="MockApi")

Endpoint = Callable[Concatenate[ApiT, P], Coroutine[Any, Any, ApiResponse]]


def summarize_validation_errors(errors: Sequence[Mapping[str, Any]]) -> list[dict[str, Any]]:
    """Reduce pydantic errors to JSON-safe {loc, msg, type} entries."""
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"], "type": error["type"]}
        for error in errors
    ]


def endpoint(
    delay_ms: int,
) -> Callable[[Callable[Concatenate[ApiT, P], Any]], Endpoint[ApiT, P]]:
    """
    Turn a synchronous operation body into an async API call.

    The body may return an ``ApiResponse`` (used as-is) or any other value
    (wrapped as success data). ``ApiError`` and pydantic ``ValidationError``
    become failure envelopes.
    """

    def decorator(func: Callable[Concatenate[ApiT, P], Any]) -> Endpoint[ApiT, P]:
        @functools.wraps(func)
        async def wrapper(self: ApiT, *args: P.args, **kwargs: P.kwargs) -> ApiResponse:
            await self.latency.wait(delay_ms)
            try:
                result = func(self, *args, **kwargs)
            except ApiError as exc:
                logger.info(
                    "api_request_rejected",
                    extra={"operation": func.__name__, "code": exc.code.value},
                )
                return exc.to_response()
            except ValidationError as exc:
                logger.info(
                    "api_request_invalid",
                    extra={"operation": func.__name__, "error_count": exc.error_count()},
                )
                return ApiResponse.failure(
                    ErrorCode.INVALID_REQUEST,
                    details={"errors": summarize_validation_errors(exc.errors())},
                )
            if isinstance(result, ApiResponse):
                return result
            return ApiResponse.ok(result)

        return wrapper

    return decorator


def paginate(items: Sequence[T], page: int, limit: int) -> tuple[list[T], Pagination]:
    """
    Slice one page out of an already filtered sequence.

    Raises:
        ApiError: INVALID_REQUEST if page or limit is below 1
    """
    if isinstance(page, bool) or not isinstance(page, int) or page < 1:
        raise ApiError(ErrorCode.INVALID_REQUEST, "page must be an integer >= 1", {"page": page})
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ApiError(
            ErrorCode.INVALID_REQUEST, "limit must be an integer >= 1", {"limit": limit}
        )

    start = (page - 1) * limit
    return list(items[start : start + limit]), Pagination.for_page(page, limit, len(items))


def require_optional_text(field: str, value: object) -> None:
    """
    Reject a filter argument that is neither None nor a string.

    Raises:
        ApiError: INVALID_REQUEST naming the field and the received type
    """
    if value is not None and not isinstance(value, str):
        raise ApiError(
            ErrorCode.INVALID_REQUEST,
            f"{field} must be a string",
            {field: type(value).__name__},
        )


class MockApi:
    """Base for the entity APIs: a store handle plus simulated latency."""

    def __init__(self, store: Store, latency: Latency | None = None) -> None:
        self.store = store
        self.latency = latency or Latency()

    def _require_game(self, game_id: str) -> Game:
        game = self.store.games.get(game_id) if game_id else None
        if game is None:
            raise ApiError(ErrorCode.GAME_NOT_FOUND)
        return game
