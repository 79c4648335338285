"""Client for the AppChains report service and the genomic beacon service."""

from appchains.application import AppChains, JobPoller, JobSubmitter, ResultTransformer
from appchains.core.config import AppChainsSettings
from appchains.core.errors import (
    AppChainsError,
    ConfigurationError,
    JobCancelledError,
    JobProcessingError,
    JobTimeoutError,
    ProtocolError,
    RemoteServiceError,
    TransportError,
)
from appchains.domain import (
    FileResultValue,
    Job,
    RawJobResult,
    Report,
    Result,
    ResultProp,
    ResultType,
    TextResultValue,
)

__all__ = [
    "AppChains",
    "AppChainsError",
    "AppChainsSettings",
    "ConfigurationError",
    "FileResultValue",
    "Job",
    "JobCancelledError",
    "JobPoller",
    "JobProcessingError",
    "JobSubmitter",
    "JobTimeoutError",
    "ProtocolError",
    "RawJobResult",
    "RemoteServiceError",
    "Report",
    "Result",
    "ResultProp",
    "ResultTransformer",
    "ResultType",
    "TextResultValue",
    "TransportError",
]
