"""Exception handlers for FastAPI integration."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from sqla_admin_decor.exceptions import ConfigurationError, UnknownResourceError

__all__ = ["install_error_handlers"]


def install_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for sqla-admin-decor errors on a FastAPI app.

    - ``UnknownResourceError`` -> 404 Not Found
    - ``ConfigurationError`` -> 500 Internal Server Error

    Example::

        app = FastAPI()
        install_error_handlers(app)
    """

    @app.exception_handler(UnknownResourceError)
    async def unknown_resource_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: UnknownResourceError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={"detail": str(exc)},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(  # pyright: ignore[reportUnusedFunction]
        request: object, exc: ConfigurationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=500,
            content={"detail": str(exc)},
        )
