"""
Domain errors surfaced to HTTP callers.
Each carries only a public message; the underlying cause is chained, never exposed.
"""

INVALID_REQUEST_BODY = "Invalid request body"
MISSING_AUTH_HEADER = "Missing or invalid Authorization header"
INVALID_TOKEN = "Invalid or expired token"


class SigningError(Exception):
    """Key parsing or signing failed while issuing a token."""

    def __init__(self, message: str = INVALID_REQUEST_BODY) -> None:
        super().__init__(message)
        self.message = message


class AuthError(Exception):
    """A secured request was rejected."""

    def __init__(self, message: str = INVALID_TOKEN) -> None:
        super().__init__(message)
        self.message = message
