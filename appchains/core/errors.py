"""Exception hierarchy raised by the AppChains client."""
from __future__ import annotations


class AppChainsError(RuntimeError):
    """Base class for every error raised by this package."""


class ConfigurationError(AppChainsError):
    """Raised when the client lacks settings required for an operation."""


class TransportError(AppChainsError):
    """Raised when the HTTP request itself could not be completed."""


class RemoteServiceError(AppChainsError):
    """Raised when the remote service answers with a non-200 status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"AppChains returned error HTTP code {status_code} with message {body}")
        self.status_code = status_code
        self.body = body


class ProtocolError(AppChainsError):
    """Raised when a response is well-formed HTTP but carries an invalid payload."""


class JobProcessingError(AppChainsError):
    """Raised when polling an already submitted job fails."""

    def __init__(self, job_id: int | str, message: str | None = None) -> None:
        super().__init__(message or f"Error processing job: {job_id}")
        self.job_id = job_id


class JobTimeoutError(JobProcessingError):
    """Raised when a job does not reach a terminal status before the deadline."""


class JobCancelledError(JobProcessingError):
    """Raised when the caller cancels polling."""


__all__ = [
    "AppChainsError",
    "ConfigurationError",
    "JobCancelledError",
    "JobProcessingError",
    "JobTimeoutError",
    "ProtocolError",
    "RemoteServiceError",
    "TransportError",
]
