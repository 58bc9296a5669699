"""URL helpers for a chat client talking to a realm."""

import logging

from .config import AutocompleteConfig, load_autocomplete_config
from .models import Auth, AutocompletionDefaults, AutocompletionPieces, Resource, UrlParams
from .transport import get_auth_headers
from .url import (
    autocomplete_realm,
    autocomplete_realm_pieces,
    encode_params_for_url,
    fix_realm_url,
    get_file_extension,
    get_full_url,
    get_mime_type_from_file_extension,
    get_resource,
    is_url_an_image,
    is_url_on_realm,
    is_valid_url,
)

__all__ = [
    "Auth",
    "AutocompleteConfig",
    "AutocompletionDefaults",
    "AutocompletionPieces",
    "Resource",
    "UrlParams",
    "autocomplete_realm",
    "autocomplete_realm_pieces",
    "encode_params_for_url",
    "fix_realm_url",
    "get_auth_headers",
    "get_file_extension",
    "get_full_url",
    "get_mime_type_from_file_extension",
    "get_resource",
    "is_url_an_image",
    "is_url_on_realm",
    "is_valid_url",
    "load_autocomplete_config",
]

# Applications decide where log records go.
logging.getLogger(__name__).addHandler(logging.NullHandler())
