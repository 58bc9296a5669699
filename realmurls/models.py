"""Value shapes passed to and returned from the URL helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, NamedTuple, Optional, Union

ParamValue = Union[str, bool, int, float, None]

# ``None`` marks a missing value; such entries are skipped when encoding.
UrlParams = Mapping[str, ParamValue]


@dataclass(frozen=True, slots=True)
class Auth:
    """Credentials for one realm.

    Only ``realm`` is read by the URL helpers; ``email`` and ``api_key`` feed
    :func:`realmurls.transport.get_auth_headers`.
    """

    realm: str
    email: str = ""
    api_key: str = ""

    def __repr__(self) -> str:
        masked = "***" if self.api_key else ""
        return f"Auth(realm={self.realm!r}, email={self.email!r}, api_key={masked!r})"


@dataclass(frozen=True, slots=True)
class AutocompletionDefaults:
    protocol: str
    domain: str


class AutocompletionPieces(NamedTuple):
    """A candidate realm URL split around the user's input."""

    prefix: Optional[str]
    value: str
    suffix: Optional[str]


@dataclass(frozen=True, slots=True)
class Resource:
    """A URI plus the headers a transport should send with it."""

    uri: str
    headers: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict:
        """Return ``{"uri": ...}`` with ``headers`` only when present."""

        data: Dict = {"uri": self.uri}
        if self.headers is not None:
            data["headers"] = dict(self.headers)
        return data


__all__ = [
    "Auth",
    "AutocompletionDefaults",
    "AutocompletionPieces",
    "ParamValue",
    "Resource",
    "UrlParams",
]
