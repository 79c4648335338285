"""URL construction for AppChains and beacon endpoints."""
from __future__ import annotations

from typing import Mapping
from urllib.parse import urlencode

from .config import AppChainsSettings


def base_chains_url(settings: AppChainsSettings) -> str:
    return (
        f"{settings.scheme}://{settings.chains_hostname}:{settings.port}"
        f"/{settings.protocol_version}"
    )


def job_submission_url(base_url: str, endpoint_name: str) -> str:
    return f"{base_url}/{endpoint_name}"


def job_results_url(base_url: str, job_id: int | str) -> str:
    return f"{base_url}/GetAppResults?idJob={job_id}"


def report_file_url(base_url: str, file_id: str) -> str:
    """The file id is an opaque server token and is inserted untouched."""

    return f"{base_url}/GetReportFile?id={file_id}"


def query_string(parameters: Mapping[str, object]) -> str:
    """Encode ``parameters`` as ``key=value`` pairs, keeping insertion order."""

    return urlencode([(str(key), str(value)) for key, value in parameters.items()])


def beacon_url(settings: AppChainsSettings, method_name: str, query: str) -> str:
    return (
        f"{settings.scheme}://{settings.beacon_hostname}:{settings.port}"
        f"/{method_name}/?{query}"
    )


__all__ = [
    "base_chains_url",
    "beacon_url",
    "job_results_url",
    "job_submission_url",
    "query_string",
    "report_file_url",
]
