"""Tests for :mod:`realmurls.tracing`."""

from __future__ import annotations

import json
import logging

import pytest

from realmurls.models import Resource
from realmurls.tracing import log_event, safe_json


def test_safe_json_uses_to_dict() -> None:
    """Given an object with to_dict When safe_json is used Then the dictionary form is returned."""

    payload = safe_json(Resource(uri="https://example.com/a.png"))

    assert payload == {"uri": "https://example.com/a.png"}


def test_safe_json_handles_non_finite_floats() -> None:
    """Given nan and tuples When safe_json is used Then they become JSON friendly values."""

    assert safe_json((1, float("nan"))) == [1, "nan"]


def test_log_event_emits_json(caplog: pytest.LogCaptureFixture) -> None:
    """Given structured fields When log_event is called Then a JSON encoded message is logged."""

    logger = logging.getLogger("test")
    with caplog.at_level(logging.INFO):
        log_event(logger, logging.INFO, "test.event", answer=42, missing=None)

    message = json.loads(caplog.records[0].getMessage())
    assert message == {"event": "test.event", "answer": 42}


def test_log_event_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    """Given a disabled level When log_event is called Then nothing is logged."""

    logger = logging.getLogger("test-quiet")
    with caplog.at_level(logging.WARNING):
        log_event(logger, logging.DEBUG, "test.hidden")

    assert not caplog.records
