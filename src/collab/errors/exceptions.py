"""Custom exception classes for the Collab API."""


class CollabError(Exception):
    """Base exception carrying the client-facing message and HTTP status."""

    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class InvalidInputError(CollabError):
    """Request body failed a validation rule."""

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class NotFoundError(CollabError):
    """Resource not found by the given lookup key."""

    def __init__(self, resource: str, key: str, value):
        super().__init__(f"No {resource} found with {key} {value}", status_code=404)


class AuthenticationError(CollabError):
    """Missing, invalid, or unresolvable bearer token."""

    def __init__(self, message: str = "Unauthorized request"):
        super().__init__(message, status_code=401)


class AuthorizationError(CollabError):
    """Authenticated user may not act on the resource."""

    def __init__(self, message: str = "Forbidden"):
        super().__init__(message, status_code=403)
