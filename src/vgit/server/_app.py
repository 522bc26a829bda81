# pyright: reportAny=false
"""FastAPI application factory."""

import time
from typing import TYPE_CHECKING, cast

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse, RedirectResponse

from vgit.browse import DisplayKind, RepositoryBrowser, build_display_path, split_path
from vgit.config import Config
from vgit.exceptions import (
    EntryKindMismatchError,
    EntryNotFoundError,
    ReferenceNotFoundError,
    RepositoryNotFoundError,
    VgitError,
)
from vgit.utils import create_logger

from ._api import API_PREFIX, api_router
from ._pages import router as pages_router
from ._schemas import ErrorResponse
from ._templating import templates

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from structlog.typing import FilteringBoundLogger

HEALTH_PATH = f"{API_PREFIX}/health"


def _error_response(request: Request, status_code: int, detail: str) -> Response:
    if request.url.path.startswith(f"{API_PREFIX}/"):
        return JSONResponse(
            ErrorResponse(detail=detail).model_dump(), status_code=status_code
        )
    return templates.TemplateResponse(
        request=request,
        name="error.html",
        context={"status_code": status_code, "detail": detail},
        status_code=status_code,
    )


async def handle_not_found(request: Request, exc: Exception) -> Response:
    return _error_response(request, 404, str(exc))


async def handle_kind_mismatch(request: Request, exc: Exception) -> Response:
    mismatch = cast("EntryKindMismatchError", exc)
    kind = DisplayKind.BLOB if mismatch.is_file else DisplayKind.TREE
    location = build_display_path(
        mismatch.repo_name, kind, mismatch.ref_shorthand, split_path(mismatch.path)
    )
    return RedirectResponse(location, status_code=302)


async def handle_vgit_error(request: Request, exc: Exception) -> Response:
    logger = cast("FilteringBoundLogger", request.app.state.logger)
    logger.error(
        "request_failed",
        method=request.method,
        path=request.url.path,
        error=type(exc).__name__,
        message=str(exc),
    )
    return _error_response(request, 500, "Internal server error")


async def log_requests(
    request: Request, call_next: "Callable[[Request], Awaitable[Response]]"  # noqa: UP037
) -> Response:
    """Log method, path, status and duration of every request but health checks."""
    if request.url.path == HEALTH_PATH:
        return await call_next(request)

    start = time.perf_counter()
    response = await call_next(request)
    logger = cast("FilteringBoundLogger", request.app.state.logger)
    logger.info(
        "request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=round((time.perf_counter() - start) * 1000, 2),
    )
    return response


def create_app(
    config: Config | None = None,
    *,
    browser: RepositoryBrowser | None = None,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> FastAPI:
    """Build the web application.

    Args:
        config: Effective configuration. Defaults to built-in defaults.
        browser: Browser serving the routes. Built from ``config`` if omitted.
        logger: Logger for requests and failures. Built from ``config`` if
            omitted.

    Returns:
        The configured FastAPI application.
    """
    cfg = config if config is not None else Config.from_dict({})
    log = logger
    if log is None:
        log = create_logger(
            level=cfg.logging.level,
            log_format=cfg.logging.format,
            log_file=cfg.logging.file,
            component="server",
        )

    if browser is None:
        browser = RepositoryBrowser(
            cfg.browser.root_path,
            description_file=cfg.browser.description_file,
            max_workers=cfg.browser.max_workers,
            prefer_longest_ref=cfg.browser.prefer_longest_ref,
            logger=log,
        )

    app = FastAPI(title="vgit", docs_url=None, redoc_url="/api-docs")
    app.state.config = cfg
    app.state.browser = browser
    app.state.logger = log

    app.add_exception_handler(RepositoryNotFoundError, handle_not_found)
    app.add_exception_handler(ReferenceNotFoundError, handle_not_found)
    app.add_exception_handler(EntryNotFoundError, handle_not_found)
    app.add_exception_handler(EntryKindMismatchError, handle_kind_mismatch)
    app.add_exception_handler(VgitError, handle_vgit_error)
    app.middleware("http")(log_requests)

    app.include_router(router=api_router)
    app.include_router(router=pages_router)
    return app

