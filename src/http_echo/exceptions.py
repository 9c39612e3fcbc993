"""
Custom exception hierarchy for the HTTP echo server.

Each exception carries a context dict for structured logging.
"""


class EchoServerError(Exception):
    """Base exception for all echo server errors."""

    def __init__(self, message: str, context: dict = None):
        self.context = context or {}
        super().__init__(message)


class LifecycleError(EchoServerError):
    """Base exception for start/stop lifecycle errors."""
    pass


class AlreadyRunningError(LifecycleError):
    """Raised when start() is called on a running server."""
    pass


class BindFailedError(LifecycleError):
    """Raised when the listener cannot bind or listen on host:port."""
    pass


class ConfigurationError(EchoServerError):
    """Raised when configuration is invalid."""
    pass


class ValidationError(EchoServerError):
    """Raised when input validation fails."""
    pass
