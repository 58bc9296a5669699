"""Authorization headers for requests sent to a realm."""

from __future__ import annotations

import base64
import logging
from typing import Dict

from .models import Auth
from .tracing import log_event

_LOGGER = logging.getLogger(__name__)


def get_auth_headers(auth: Auth) -> Dict[str, str]:
    """Return HTTP Basic credentials for ``auth``, or ``{}`` without an API key."""

    if not auth.api_key:
        log_event(_LOGGER, logging.DEBUG, "transport.auth_headers.skipped", realm=auth.realm)
        return {}

    token = base64.b64encode(f"{auth.email}:{auth.api_key}".encode("utf-8")).decode("ascii")
    log_event(_LOGGER, logging.DEBUG, "transport.auth_headers.built", realm=auth.realm)
    return {"Authorization": f"Basic {token}"}


__all__ = ["get_auth_headers"]
