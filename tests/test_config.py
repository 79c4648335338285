from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from appchains.core.config import BEACON_HOSTNAME, AppChainsSettings
from appchains.core.errors import ConfigurationError
from appchains.core.urls import base_chains_url, job_results_url, job_submission_url, report_file_url


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "APPCHAINS_TOKEN",
        "APPCHAINS_HOSTNAME",
        "APPCHAINS_BEACON_HOSTNAME",
        "APPCHAINS_POLL_INTERVAL",
        "APPCHAINS_HTTP_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_service_constants():
    settings = AppChainsSettings()

    assert settings.scheme == "https"
    assert settings.port == 443
    assert settings.protocol_version == "v1"
    assert settings.beacon_hostname == BEACON_HOSTNAME == "beacon.sequencing.com"
    assert settings.poll_interval == 1.0


def test_from_env_reads_appchains_variables(monkeypatch):
    monkeypatch.setenv("APPCHAINS_TOKEN", "tok")
    monkeypatch.setenv("APPCHAINS_HOSTNAME", "api.sequencing.com")
    monkeypatch.setenv("APPCHAINS_BEACON_HOSTNAME", "beacon.example.org")
    monkeypatch.setenv("APPCHAINS_POLL_INTERVAL", "2.5")

    settings = AppChainsSettings.from_env()

    assert settings.token == "tok"
    assert settings.chains_hostname == "api.sequencing.com"
    assert settings.beacon_hostname == "beacon.example.org"
    assert settings.poll_interval == 2.5
    assert settings.http_timeout == 30.0


def test_from_env_rejects_non_numeric_interval(monkeypatch):
    monkeypatch.setenv("APPCHAINS_POLL_INTERVAL", "soon")

    with pytest.raises(ConfigurationError, match="APPCHAINS_POLL_INTERVAL"):
        AppChainsSettings.from_env()


@pytest.mark.parametrize("kwargs", [{"poll_interval": -1}, {"http_timeout": 0}])
def test_invalid_numbers_are_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        AppChainsSettings(**kwargs)


def test_require_chains():
    with pytest.raises(ConfigurationError, match="hostname"):
        AppChainsSettings(token="t").require_chains()
    with pytest.raises(ConfigurationError, match="token"):
        AppChainsSettings(chains_hostname="h").require_chains()
    AppChainsSettings(token="t", chains_hostname="h").require_chains()


def test_chains_urls():
    base = base_chains_url(AppChainsSettings(chains_hostname="api.sequencing.com"))

    assert base == "https://api.sequencing.com:443/v1"
    assert job_submission_url(base, "StartApp") == "https://api.sequencing.com:443/v1/StartApp"
    assert job_results_url(base, 42) == "https://api.sequencing.com:443/v1/GetAppResults?idJob=42"
    assert report_file_url(base, "tok/en") == "https://api.sequencing.com:443/v1/GetReportFile?id=tok/en"
