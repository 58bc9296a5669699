"""Configuration of the realm autocompletion defaults."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import AutocompletionDefaults

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "autocomplete.json"

DEFAULT_PROTOCOL = "https://"
DEFAULT_DOMAIN = "zulipchat.com"

_ENV_OVERRIDES = {
    "protocol": "REALMURLS_DEFAULT_PROTOCOL",
    "domain": "REALMURLS_DEFAULT_DOMAIN",
}


class AutocompleteConfig(BaseModel):
    """Fallback values offered while a user types a realm address."""

    model_config = ConfigDict(frozen=True)

    protocol: str = Field(
        default=DEFAULT_PROTOCOL,
        description="Protocol prepended when the input has none",
    )
    domain: str = Field(
        default=DEFAULT_DOMAIN,
        description="Domain appended when the input has no dot",
    )

    @field_validator("protocol", mode="before")
    @classmethod
    def _normalise_protocol(cls, value: str | None) -> str:
        candidate = (value or "").strip() or DEFAULT_PROTOCOL
        if not candidate.endswith("://"):
            raise ValueError(f"Protocol '{value}' must end with '://'.")
        return candidate

    @field_validator("domain", mode="before")
    @classmethod
    def _normalise_domain(cls, value: str | None) -> str:
        candidate = (value or "").strip().lstrip(".")
        return candidate or DEFAULT_DOMAIN

    @classmethod
    def load(cls, path: Path | None = None) -> "AutocompleteConfig":
        """Load configuration from disk and environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning(
                    "Unable to decode autocomplete config at %s: %s", config_path, exc
                )

        for field_name, env_name in _ENV_OVERRIDES.items():
            env_value = os.environ.get(env_name)
            if env_value is not None:
                data[field_name] = env_value

        filtered: Dict[str, Any] = {
            key: data[key] for key in _ENV_OVERRIDES if data.get(key) is not None
        }

        return cls(**filtered)

    def defaults(self) -> AutocompletionDefaults:
        return AutocompletionDefaults(protocol=self.protocol, domain=self.domain)


def load_autocomplete_config(path: Path | None = None) -> AutocompleteConfig:
    """Helper to load the autocompletion configuration."""

    return AutocompleteConfig.load(path)


__all__ = [
    "AutocompleteConfig",
    "DEFAULT_DOMAIN",
    "DEFAULT_PROTOCOL",
    "load_autocomplete_config",
]
