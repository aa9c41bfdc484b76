"""FastAPI exception handlers producing ``{"error": message}`` bodies."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from collab.errors.exceptions import AuthorizationError, CollabError

logger = logging.getLogger(__name__)


def _request_validation_message(exc: RequestValidationError) -> str:
    """Describe the first request validation error in one sentence."""
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        source = loc[0] if loc else "body"
        if err.get("type") == "json_invalid":
            return "Request body must be valid JSON"
        if len(loc) < 2:
            return "Request body must be a JSON object"
        field = loc[1]
        where = "request body" if source == "body" else f"request {source}"
        if err.get("type") == "missing":
            return f"Missing '{field}' in {where}"
        return f"Invalid '{field}' in {where}"
    return "Invalid request body"


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(CollabError)
    async def collab_error_handler(request: Request, exc: CollabError):
        if isinstance(exc, AuthorizationError):
            user = getattr(request.state, "user", {}) or {}
            logger.warning(
                "access_denied",
                extra={
                    "path": request.url.path,
                    "method": request.method,
                    "trace_id": getattr(request.state, "trace_id", "unknown"),
                    "user_sub": user.get("sub", "anonymous"),
                    "reason": str(exc),
                },
            )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"error": _request_validation_message(exc)})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(
            "unhandled_error",
            extra={"path": request.url.path, "trace_id": getattr(request.state, "trace_id", "unknown")},
        )
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
