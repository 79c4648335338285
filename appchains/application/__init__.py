"""Application services."""

from .facade import AppChains
from .polling import JobPoller
from .submission import JobSubmitter
from .transform import ResultTransformer

__all__ = [
    "AppChains",
    "JobPoller",
    "JobSubmitter",
    "ResultTransformer",
]
