"""JWT Bearer authentication middleware."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from collab.logging_config import bind_request_context
from collab.security import decode_access_token

logger = logging.getLogger(__name__)

ANONYMOUS = {"sub": "anonymous"}


class AuthMiddleware(BaseHTTPMiddleware):
    """Decode the Bearer token, if any, and attach its claims to request.state.

    Routes decide whether a user is required; see ``get_current_user``.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        auth_header = request.headers.get("authorization", "")

        if auth_header.lower().startswith("bearer "):
            user_info = self._validate_jwt(auth_header[7:].strip())
        else:
            user_info = dict(ANONYMOUS)

        request.state.user = user_info
        if "_auth_error" not in user_info and user_info["sub"] != "anonymous":
            bind_request_context(getattr(request.state, "trace_id", "unknown"), user_info["sub"])
        return await call_next(request)

    def _validate_jwt(self, token: str) -> dict:
        try:
            payload = decode_access_token(token)
        except ValueError as exc:
            logger.debug("JWT decode failed: %s", exc)
            return {**ANONYMOUS, "_auth_error": "invalid_token"}

        return {
            "sub": payload.get("sub", ""),
            "user_id": payload.get("user_id"),
        }
