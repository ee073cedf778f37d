"""
Exceptions raised by the blockade client.

Callers can tell apart an unreachable service (TransportError), a rejected
request (ServerError), an unparsable response (DecodeError) and a local
precondition failure (OtherError).
"""

from enum import Enum
from typing import Optional


# The daemon reports a name conflict only through this response body.
BLOCKADE_EXISTS_MESSAGE = "Blockade name already exists"


class ServerErrorKind(Enum):
    """Classification of a server-side failure."""
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    OTHER = "other"


def classify_server_error(body: str, status_code: Optional[int] = None) -> ServerErrorKind:
    """Map a non-2xx response to a ServerErrorKind.

    The service has no machine-readable error codes, so the conflict case is
    recognised by comparing the raw body with BLOCKADE_EXISTS_MESSAGE.
    """
    if body == BLOCKADE_EXISTS_MESSAGE:
        return ServerErrorKind.ALREADY_EXISTS
    if status_code == 404:
        return ServerErrorKind.NOT_FOUND
    return ServerErrorKind.OTHER


class BlockadeError(Exception):
    """Base exception for all blockade client errors."""

    pass


class TransportError(BlockadeError):
    """
    Raised when the blockade service cannot be reached.

    Wraps connection failures, timeouts and other errors raised by the
    HTTP client before a response was received.
    """

    def __init__(self, message: str):
        super().__init__(f"Transport error: {message}")


class ServerError(BlockadeError):
    """
    Raised when the blockade service answers with a non-2xx status.

    The response body is the only detail the service provides.
    """

    def __init__(self, body: str, status_code: Optional[int] = None):
        self.body = body
        self.status_code = status_code
        self.kind = classify_server_error(body, status_code)
        message = f"Server error: {body}"
        if status_code is not None:
            message = f"Server error (HTTP {status_code}): {body}"
        super().__init__(message)


class DecodeError(BlockadeError):
    """Raised when a response body is not valid JSON or has an unexpected shape."""

    def __init__(self, message: str):
        super().__init__(f"Decode error: {message}")


class OtherError(BlockadeError):
    """Raised when a local precondition fails, e.g. a missing cache entry."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigLoadError(BlockadeError):
    """
    Raised when a settings or blockade definition file cannot be loaded.

    Check that the file exists, is valid YAML, and has the expected structure.
    """

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Failed to load configuration from: {path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)
