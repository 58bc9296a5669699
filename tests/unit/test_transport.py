"""Tests for :mod:`realmurls.transport`."""

from __future__ import annotations

import base64

from realmurls.models import Auth
from realmurls.transport import get_auth_headers


def test_get_auth_headers_builds_basic_credentials(auth: Auth) -> None:
    """Given an API key When headers are built Then a Basic Authorization header is returned."""

    headers = get_auth_headers(auth)

    scheme, token = headers["Authorization"].split(" ")
    assert scheme == "Basic"
    assert base64.b64decode(token).decode("utf-8") == "iago@example.com:abc123"


def test_get_auth_headers_encodes_utf8() -> None:
    """Given non-ASCII credentials When headers are built Then they are UTF-8 encoded before base64."""

    headers = get_auth_headers(Auth(realm="https://example.com", email="zoë@example.com", api_key="ключ"))

    token = headers["Authorization"].removeprefix("Basic ")
    assert base64.b64decode(token).decode("utf-8") == "zoë@example.com:ключ"


def test_get_auth_headers_without_api_key(anonymous_auth: Auth) -> None:
    """Given no API key When headers are built Then no header is returned."""

    assert get_auth_headers(anonymous_auth) == {}
