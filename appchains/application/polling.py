"""Polling of submitted jobs until the server reports a terminal status."""
from __future__ import annotations

import json
import logging
import threading
import time
from typing import Any, Callable

from pydantic import ValidationError

from appchains.core.errors import (
    AppChainsError,
    JobCancelledError,
    JobProcessingError,
    JobTimeoutError,
    ProtocolError,
    RemoteServiceError,
)
from appchains.core.schema import AppResultsPayload
from appchains.core.urls import job_results_url
from appchains.domain import Job, RawJobResult, ResultProp
from appchains.infrastructure.http import HttpClient

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = frozenset({"completed", "failed"})


def is_terminal(status: str) -> bool:
    return status.lower() in TERMINAL_STATUSES


def decode_job_result(job: Job, body: str) -> RawJobResult:
    """Turn a ``GetAppResults`` body into a :class:`RawJobResult`."""

    try:
        source: Any = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"job {job.job_id} status is not valid JSON") from exc
    if not isinstance(source, dict):
        raise ProtocolError(f"job {job.job_id} status is not a JSON object")

    try:
        payload = AppResultsPayload.model_validate(source)
    except ValidationError as exc:
        raise ProtocolError(f"job {job.job_id} status is missing required fields") from exc

    status = payload.status.status
    return RawJobResult(
        job_id=job.job_id,
        status=status,
        completed=is_terminal(status),
        succeeded=bool(payload.status.completed_successfully),
        result_props=tuple(
            ResultProp(name=prop.name, type=prop.type, value=prop.value)
            for prop in payload.result_props
        ),
        source=source,
    )


class JobPoller:
    """Fetches job status at a fixed interval until the job finishes.

    Polling is unbounded by default. ``timeout`` and ``cancel_event`` let the
    caller put an upper bound on the wait.
    """

    def __init__(
        self,
        http: HttpClient,
        base_url: str,
        *,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._http = http
        self._base_url = base_url
        self._interval = interval
        self._sleep = sleep
        self._clock = clock

    def fetch(self, job: Job) -> RawJobResult:
        """Perform a single status request."""

        response = self._http.get(job_results_url(self._base_url, job.job_id))
        if not response.ok:
            raise RemoteServiceError(response.status_code, response.body)
        return decode_job_result(job, response.body)

    def await_completion(
        self,
        job: Job,
        *,
        timeout: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> RawJobResult:
        deadline = None if timeout is None else self._clock() + timeout
        attempt = 0
        while True:
            if cancel_event is not None and cancel_event.is_set():
                raise JobCancelledError(job.job_id, f"Polling of job {job.job_id} was cancelled")

            attempt += 1
            try:
                result = self.fetch(job)
            except AppChainsError as exc:
                logger.warning("Polling job %s failed on attempt %d: %s", job.job_id, attempt, exc)
                raise JobProcessingError(job.job_id) from exc

            logger.debug("Job %s attempt %d status %s", job.job_id, attempt, result.status)
            if result.completed:
                logger.info(
                    "Job %s finished with status %s (succeeded=%s)",
                    job.job_id,
                    result.status,
                    result.succeeded,
                )
                return result

            if deadline is not None and self._clock() + self._interval > deadline:
                raise JobTimeoutError(
                    job.job_id,
                    f"Job {job.job_id} did not finish within {timeout} seconds",
                )
            self._sleep(self._interval)


__all__ = ["JobPoller", "TERMINAL_STATUSES", "decode_job_result", "is_terminal"]
