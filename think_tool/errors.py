"""
Error types for think_tool.

Every failure in a conversation run is terminal and surfaces as one of the
ThinkToolError subclasses below:

- ConfigError: a credential is missing or a configuration value is invalid
- TransportError: the API call failed (network, timeout, non-2xx status)
- ProtocolError: the decoded payload does not have the expected shape
- StorageError: reading or writing a thought/result file failed
"""
from enum import Enum
from typing import Optional


class ErrorPhase(Enum):
    """Which request of the conversation a failure belongs to."""
    INITIAL = "initial"
    FOLLOW_UP = "follow-up"


class ThinkToolError(Exception):
    """Base class for all think_tool errors."""


class ConfigError(ThinkToolError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class APIError(Exception):
    """
    Raised by an API client when the server answers with a non-200 status.

    Attributes:
        status_code: HTTP status code of the response
        body: Response body as text
    """

    def __init__(self, status_code: int, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"received non-200 response: {status_code}, body: {body}")


class TransportError(ThinkToolError):
    """
    Raised when sending a request to the API failed.

    Attributes:
        phase: The request that failed
        status_code: HTTP status code when the server answered, else None
    """

    def __init__(self, phase: ErrorPhase, cause: BaseException):
        self.phase = phase
        self.cause = cause
        self.status_code: Optional[int] = getattr(cause, "status_code", None)
        detail = str(cause) or cause.__class__.__name__
        super().__init__(f"{phase.value} request failed: {detail}")


class ProtocolError(ThinkToolError):
    """Raised when a response payload cannot be interpreted."""

    def __init__(self, message: str, phase: Optional[ErrorPhase] = None):
        self.phase = phase
        if phase is not None:
            message = f"{phase.value} response: {message}"
        super().__init__(message)


class StorageError(ThinkToolError):
    """Raised when reading or writing a file fails."""

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(message)
