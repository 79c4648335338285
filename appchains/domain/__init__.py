"""Domain layer definitions."""

from .reports import (
    FileDownloader,
    FileResultValue,
    Job,
    RawJobResult,
    Report,
    Result,
    ResultProp,
    ResultType,
    ResultValue,
    TextResultValue,
)

__all__ = [
    "FileDownloader",
    "FileResultValue",
    "Job",
    "RawJobResult",
    "Report",
    "Result",
    "ResultProp",
    "ResultType",
    "ResultValue",
    "TextResultValue",
]
