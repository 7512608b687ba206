import logging
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cardsmith.api import cards_router, decks_router, games_router, health_router
from cardsmith.api.deps import envelope_response
from cardsmith.config import Settings, settings
from cardsmith.mock_api.apis import MockApis
from cardsmith.mock_api.base import summarize_validation_errors
from cardsmith.mock_api.latency import Latency
from cardsmith.models.response import ApiResponse, ErrorCode
from cardsmith.store.store import Store

logger = logging.getLogger(__name__)


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed path, query or body input with an INVALID_REQUEST envelope."""
    logger.info(
        "http_request_invalid",
        extra={"path": request.url.path, "error_count": len(exc.errors())},
    )
    response = ApiResponse.failure(
        ErrorCode.INVALID_REQUEST,
        details={"errors": summarize_validation_errors(exc.errors())},
    )
    return envelope_response(response)


def create_app(
    store: Store | None = None,
    config: Settings = settings,
    latency: Latency | None = None,
) -> FastAPI:
    """
    Build the HTTP app serving the mock APIs.

    Each app owns one store; pass one in to share or pre-populate it.
    """
    app = FastAPI(title=config.app_name, version=pkg_version("cardsmith"), debug=config.debug)

    app.state.store = store or Store()
    app.state.apis = MockApis.create(
        app.state.store,
        latency or Latency(scale=config.mock_latency_scale),
        creator_id=config.default_creator_id,
    )

    app.include_router(games_router)
    app.include_router(cards_router)
    app.include_router(decks_router)
    app.include_router(health_router)

    app.add_exception_handler(
        RequestValidationError,
        invalid_request_handler,  # type: ignore[arg-type]
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Tighten in production
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


app = create_app()
