"""Thin synchronous HTTP transport shared by the AppChains clients."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import httpx

from appchains.core.errors import RemoteServiceError, TransportError

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST"})


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status code and decoded body text of a completed request."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class HttpClient:
    """Issues GET/POST requests, attaching a bearer token when one is set."""

    def __init__(
        self,
        token: str | None = None,
        *,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._token = token
        self._client = http_client or httpx.Client(timeout=timeout, follow_redirects=True)
        self._owns_client = http_client is None

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------
    def _auth_headers(self) -> dict[str, str]:
        if not self._token:
            return {}
        return {"Authorization": f"Bearer {self._token}"}

    @staticmethod
    def _encode_body(body: Mapping[str, Any] | str | bytes | None) -> bytes | None:
        if body is None:
            return None
        if isinstance(body, bytes):
            return body
        if isinstance(body, str):
            return body.encode("utf-8")
        return json.dumps(body).encode("utf-8")

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------
    def request(
        self,
        method: str,
        url: str,
        body: Mapping[str, Any] | str | bytes | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise ValueError(f"Unsupported HTTP method '{method}'")

        merged = self._auth_headers()
        content = None
        if method == "POST":
            content = self._encode_body(body)
            merged["Content-Type"] = "application/json"
        if headers:
            merged.update(headers)

        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, content=content, headers=merged)
        except httpx.HTTPError as exc:
            raise TransportError(f"Error retrieving data from {url} ({method}): {exc}") from exc

        return HttpResponse(status_code=response.status_code, body=response.text)

    def get(self, url: str, headers: Mapping[str, str] | None = None) -> HttpResponse:
        return self.request("GET", url, headers=headers)

    def post(
        self,
        url: str,
        body: Mapping[str, Any] | str | bytes | None,
        headers: Mapping[str, str] | None = None,
    ) -> HttpResponse:
        return self.request("POST", url, body=body, headers=headers)

    def download(self, url: str, destination: Path) -> Path:
        """Stream the body served at ``url`` into ``destination``."""

        destination = Path(destination)
        try:
            with self._client.stream("GET", url, headers=self._auth_headers()) as response:
                if response.status_code != 200:
                    response.read()
                    raise RemoteServiceError(response.status_code, response.text)
                destination.parent.mkdir(parents=True, exist_ok=True)
                with destination.open("wb") as fp:
                    for chunk in response.iter_bytes():
                        fp.write(chunk)
        except httpx.HTTPError as exc:
            destination.unlink(missing_ok=True)
            raise TransportError(f"Error downloading {url}: {exc}") from exc

        logger.info("Downloaded %s to %s", url, destination)
        return destination

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


__all__ = ["HttpClient", "HttpResponse", "SUPPORTED_METHODS"]
