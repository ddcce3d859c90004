import logging
from collections.abc import Mapping
from os import PathLike

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from sqlalchemy.engine import Engine

from roominspector.core.config import settings
from roominspector.core.registry import get_registry
from roominspector.explorer import mount

_logger = logging.getLogger(__name__)


def custom_generate_unique_id(route: APIRoute) -> str:
    return f"{route.tags[0]}-{route.name}"


def create_app(
    databases: Mapping[str, Engine | str | PathLike[str]] | None = None,
) -> FastAPI:
    """
    Standalone inspector application.

    ``databases`` maps display names to engines, ``sqlite:`` URLs or file paths.
    """
    logging.getLogger("roominspector").setLevel(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=None,
        generate_unique_id_function=custom_generate_unique_id,
    )

    # -----------------------------------------------------------------------
    # Exception handlers: standardized error response format
    # -----------------------------------------------------------------------

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Return 422 with a human-readable detail string instead of raw Pydantic errors."""
        messages = []
        for err in exc.errors():
            # ("body", "match", 0, "column") -> "match.0.column"
            field = ".".join(str(part) for part in err.get("loc", ())[1:])
            msg = err.get("msg", "Invalid value")
            messages.append(f"{field}: {msg}" if field else msg)
        return JSONResponse(status_code=422, content={"detail": "; ".join(messages)})

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unhandled exceptions: log and return 500 with a safe message."""
        _logger.exception(
            "Unhandled exception on %s %s", request.method, request.url.path
        )
        detail = "Internal server error"
        if settings.ENVIRONMENT == "local":
            detail = f"Internal server error: {exc}"
        return JSONResponse(status_code=500, content={"detail": detail})

    registry = get_registry()
    for name, database in (databases or {}).items():
        registry.register(name, database)

    mount(app)
    return app
