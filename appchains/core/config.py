"""Runtime settings for the AppChains client."""
from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_SCHEME = "https"
DEFAULT_PORT = 443
PROTOCOL_VERSION = "v1"
BEACON_HOSTNAME = "beacon.sequencing.com"
DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_HTTP_TIMEOUT = 30.0


@dataclass(slots=True)
class AppChainsSettings:
    """Connection parameters shared by the report and beacon clients."""

    token: str | None = None
    chains_hostname: str | None = None
    beacon_hostname: str = BEACON_HOSTNAME
    scheme: str = DEFAULT_SCHEME
    port: int = DEFAULT_PORT
    protocol_version: str = PROTOCOL_VERSION
    poll_interval: float = DEFAULT_POLL_INTERVAL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT

    def __post_init__(self) -> None:
        if self.poll_interval < 0:
            raise ConfigurationError("poll_interval must not be negative")
        if self.http_timeout <= 0:
            raise ConfigurationError("http_timeout must be positive")

    @classmethod
    def from_env(cls) -> "AppChainsSettings":
        """Build settings from ``APPCHAINS_*`` environment variables."""

        return cls(
            token=os.getenv("APPCHAINS_TOKEN") or None,
            chains_hostname=os.getenv("APPCHAINS_HOSTNAME") or None,
            beacon_hostname=os.getenv("APPCHAINS_BEACON_HOSTNAME") or BEACON_HOSTNAME,
            poll_interval=_float_from_env("APPCHAINS_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
            http_timeout=_float_from_env("APPCHAINS_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
        )

    def require_chains(self) -> None:
        """Ensure the settings needed for authenticated report calls are present."""

        if not self.chains_hostname:
            raise ConfigurationError("AppChains hostname is not configured")
        if not self.token:
            raise ConfigurationError("a security token is required for report requests")


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc


__all__ = ["AppChainsSettings", "BEACON_HOSTNAME"]
