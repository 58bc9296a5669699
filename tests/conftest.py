"""Shared pytest fixtures for the realmurls test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from realmurls.models import Auth, AutocompletionDefaults


@pytest.fixture
def realm() -> str:
    """Return the realm URL used across tests."""

    return "https://example.com"


@pytest.fixture
def auth(realm: str) -> Auth:
    """Return credentials for :func:`realm` with an API key."""

    return Auth(realm=realm, email="iago@example.com", api_key="abc123")


@pytest.fixture
def anonymous_auth(realm: str) -> Auth:
    """Return credentials for :func:`realm` without an API key."""

    return Auth(realm=realm)


@pytest.fixture
def defaults() -> AutocompletionDefaults:
    """Return the autocompletion defaults used by the client."""

    return AutocompletionDefaults(protocol="https://", domain="zulipchat.com")


@pytest.fixture(autouse=True)
def clear_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep environment overrides from leaking into configuration tests."""

    monkeypatch.delenv("REALMURLS_DEFAULT_PROTOCOL", raising=False)
    monkeypatch.delenv("REALMURLS_DEFAULT_DOMAIN", raising=False)
