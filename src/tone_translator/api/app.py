"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tone_translator.api.routes import router as translations_router
from tone_translator.app_logging import configure_logging
from tone_translator.config import parse_log_level
from tone_translator.containers import AppContainer
from tone_translator.domain.errors import TranslatorError, ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(parse_log_level(container.settings.log_level))
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    @app.exception_handler(TranslatorError)
    async def translator_error_handler(
        request: Request, exc: TranslatorError
    ) -> JSONResponse:
        logger.info(
            "Request failed: %s %s code=%s", request.method, request.url.path, exc.code
        )
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(ValidationError(_format_validation_errors(exc)))

    app.include_router(translations_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error_response(exc: TranslatorError) -> JSONResponse:
    return JSONResponse(
        status_code=int(exc.status_code),
        content={
            "success": False,
            "error": {"code": exc.code, "message": exc.message},
        },
    )


def _format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI validation errors into one message."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request."
