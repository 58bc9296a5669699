"""Helpers for building realm URLs and autocompleting realm addresses."""

from __future__ import annotations

import ipaddress
import logging
import math
import re
import warnings
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, Optional, Tuple
from urllib.parse import quote, urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .models import (
    Auth,
    AutocompletionDefaults,
    AutocompletionPieces,
    ParamValue,
    Resource,
    UrlParams,
)
from .tracing import log_event
from .transport import get_auth_headers

_LOGGER = logging.getLogger(__name__)

# Characters ``encodeURIComponent`` leaves alone on top of quote()'s defaults.
_URI_COMPONENT_SAFE = "!~*'()"

_ABSOLUTE_URL_RE = re.compile(r"^(http|www\.)", re.IGNORECASE)
_PROTOCOL_RE = re.compile(r"\s*((?:http|https)://)(.*)")
_HAS_PROTOCOL_RE = re.compile(r"^\s*(?:http|https)://", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s")

_IMAGE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp"})

_MIME_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "jpeg": "image/jpeg",
        "jpg": "image/jpeg",
        "png": "image/png",
        "gif": "image/gif",
        "tif": "image/tiff",
        "tiff": "image/tiff",
        "mov": "video/quicktime",
    }
)
_DEFAULT_MIME_TYPE = "application/octet-stream"

_URL_ADAPTER = TypeAdapter(AnyUrl)
_VALID_URL_SCHEMES = frozenset({"http", "https", "ftp"})
_TLD_RE = re.compile(r"^(?:[^\W\d_]{2,}|xn--[a-z0-9-]+)$", re.IGNORECASE)


def _float_to_string(value: float) -> str:
    """Render a finite float the way JavaScript's ``Number#toString`` does.

    Digits come from ``repr`` (shortest round-trip). Plain decimal notation is
    used while the decimal point sits between 10**-7 and 10**21.
    """

    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    count = len(digits)
    point = count + exponent
    if count <= point <= 21:
        body = digits + "0" * (point - count)
    elif 0 < point <= 21:
        body = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        body = f"0.{'0' * -point}{digits}"
    else:
        mantissa = digits if count == 1 else f"{digits[0]}.{digits[1:]}"
        power = point - 1
        body = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"

    return f"-{body}" if sign else body


def _param_to_string(value: ParamValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _float_to_string(value)
    return str(value)


def encode_params_for_url(params: UrlParams) -> str:
    """Encode ``params`` the way a browser encodes an HTML form query.

    Entries whose value is ``None`` are dropped. Keys and values are
    percent-encoded like JavaScript's ``encodeURIComponent``.
    """

    return "&".join(
        f"{quote(str(key), safe=_URI_COMPONENT_SAFE)}="
        f"{quote(_param_to_string(value), safe=_URI_COMPONENT_SAFE)}"
        for key, value in params.items()
        if value is not None
    )


def get_full_url(url: Optional[str], realm: str) -> str:
    """Return ``url`` unchanged if absolute, otherwise joined onto ``realm``."""

    url = url or ""
    if url.startswith("http"):
        return url
    separator = "" if url.startswith("/") else "/"
    return f"{realm}{separator}{url}"


def is_url_on_realm(url: Optional[str], realm: str) -> bool:
    """Return whether ``url`` should be treated as pointing at ``realm``.

    Anything that does not look like an absolute URL to another host counts as
    same-realm, so it receives the realm's auth headers.
    """

    url = url or ""
    return url.startswith("/") or url.startswith(realm) or _ABSOLUTE_URL_RE.match(url) is None


def get_resource(uri: str, auth: Auth) -> Resource:
    """Return the resource for ``uri``, with auth headers when it is on the realm."""

    if is_url_on_realm(uri, auth.realm):
        log_event(_LOGGER, logging.DEBUG, "url.resource.authenticated", realm=auth.realm)
        return Resource(uri=get_full_url(uri, auth.realm), headers=get_auth_headers(auth))

    log_event(_LOGGER, logging.DEBUG, "url.resource.external", uri=uri)
    return Resource(uri=uri)


def has_protocol(url: Optional[str] = "") -> bool:
    """Deprecated: whether ``url`` starts with ``http://`` or ``https://``."""

    return _HAS_PROTOCOL_RE.search(url or "") is not None


def parse_protocol(value: str) -> Tuple[Optional[str], str]:
    """Split ``value`` into its protocol and the rest.

    Leading whitespace is ignored. The protocol is ``None`` when ``value``
    does not start with ``http://`` or ``https://``.

    Only exported for tests.
    """

    match = _PROTOCOL_RE.fullmatch(value)
    if match is None:
        return None, value
    return match.group(1), match.group(2)


def fix_realm_url(url: Optional[str] = "") -> str:
    """Deprecated: tidy a user-typed realm URL into ``https://host`` form."""

    warnings.warn(
        "fix_realm_url is deprecated; use autocomplete_realm instead",
        DeprecationWarning,
        stacklevel=2,
    )
    if not url:
        return ""

    trimmed = _WHITESPACE_RE.sub("", url)
    if trimmed.endswith("/"):
        trimmed = trimmed[:-1]

    return trimmed if has_protocol(trimmed) else f"https://{trimmed}"


def get_file_extension(filename: str) -> str:
    """Return the text after the last ``.``, or ``filename`` itself if there is none."""

    return filename.rsplit(".", 1)[-1]


def is_url_an_image(url: str) -> bool:
    return get_file_extension(url).lower() in _IMAGE_EXTENSIONS


def get_mime_type_from_file_extension(extension: str) -> str:
    return _MIME_TYPES.get(extension.lower(), _DEFAULT_MIME_TYPE)


def is_valid_url(url: str) -> bool:
    """Return whether the whole of ``url`` looks like a web URL.

    The scheme may be omitted. The host must be ``localhost``, an IP address
    written out in full (dotted-quad IPv4 or bracketed IPv6) or a dotted name
    ending in an alphabetic top-level label.
    """

    if not url or _WHITESPACE_RE.search(url):
        return False

    candidate = url if "://" in url else f"http://{url}"
    try:
        parsed = _URL_ADAPTER.validate_python(candidate)
    except ValidationError:
        return False

    if parsed.scheme not in _VALID_URL_SCHEMES or not parsed.host:
        return False

    host = parsed.host
    if host == "localhost":
        return True

    # The parser rewrites shorthand numeric hosts ("123" -> "0.0.0.123"), so
    # only the host as typed may count as an IP address.
    typed_host = urlsplit(candidate).hostname or ""
    try:
        ipaddress.ip_address(typed_host)
    except ValueError:
        pass
    else:
        return True

    labels = host.rstrip(".").split(".")
    return len(labels) >= 2 and all(labels) and _TLD_RE.match(labels[-1]) is not None


def autocomplete_realm_pieces(
    value: str,
    defaults: AutocompletionDefaults,
) -> AutocompletionPieces:
    """Split user input naming a realm into a prefix, value and suffix.

    Joined together the pieces may form a full realm URL: the default protocol
    is offered when ``value`` has none, and the default domain when the part
    after the protocol contains no ``.``.

    The middle piece is currently always ``value`` itself. Callers should not
    rely on that.
    """

    protocol, non_protocol_value = parse_protocol(value)

    prefix = defaults.protocol if protocol is None else None
    suffix = None if "." in non_protocol_value else f".{defaults.domain}"

    return AutocompletionPieces(prefix, value, suffix)


def autocomplete_realm(value: str, defaults: AutocompletionDefaults) -> str:
    """Return the best-guess realm URL for ``value``; ``""`` stays ``""``."""

    if value == "":
        return ""
    return "".join(piece for piece in autocomplete_realm_pieces(value, defaults) if piece)


__all__ = [
    "autocomplete_realm",
    "autocomplete_realm_pieces",
    "encode_params_for_url",
    "fix_realm_url",
    "get_file_extension",
    "get_full_url",
    "get_mime_type_from_file_extension",
    "get_resource",
    "has_protocol",
    "is_url_an_image",
    "is_url_on_realm",
    "is_valid_url",
    "parse_protocol",
]
