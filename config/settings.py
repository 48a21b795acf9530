"""Settings management utilities for the Brave Search client.

Updates:
  v0.2.1 - 2026-10-15 - Ignore subscription tokens supplied through JSON configuration.
  v0.2.0 - 2026-10-12 - Read BRAVE_API_KEY aliases and .env secrets alongside prefixed env vars.
  v0.1.1 - 2026-10-09 - Validate host URLs with the client normaliser.
  v0.1.0 - 2026-10-06 - Created settings model with JSON/env source precedence.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from brave_search.client import DEFAULT_HOST, DEFAULT_TIMEOUT_SECONDS, normalise_host

ENV_PREFIX = "BRAVE_SEARCH_"
DEFAULT_CONFIG_PATH = Path("config") / "config.json"
DEFAULT_LOG_LEVEL = "INFO"
_DOTENV_FALLBACK_PATH = ".env"
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

# Prefixed suffixes first, then unprefixed aliases accepted verbatim.
_ENV_ALIASES: dict[str, tuple[tuple[str, ...], tuple[str, ...]]] = {
    "api_token": (("API_TOKEN", "API_KEY", "TOKEN"), ("BRAVE_API_KEY",)),
    "host": (("HOST",), ()),
    "timeout_seconds": (("TIMEOUT_SECONDS",), ()),
    "log_level": (("LOG_LEVEL",), ()),
}
_JSON_CONFIG_KEYS = ("host", "timeout_seconds", "log_level")
_JSON_SECRET_KEYS = {
    "api_token",
    "api_key",
    "token",
    "BRAVE_API_KEY",
    "BRAVE_SEARCH_API_TOKEN",
}

logger = logging.getLogger("brave_search.settings")


class SettingsError(Exception):
    """Raised when Brave Search configuration cannot be loaded or validated."""


def _read_dotenv_values() -> dict[str, str]:
    """Load ``.env`` entries into a mapping without mutating ``os.environ``."""
    env_file_override = os.getenv(f"{ENV_PREFIX}ENV_FILE")
    if env_file_override is not None:
        candidate = env_file_override.strip()
        if not candidate:
            return {}
        path = Path(candidate).expanduser()
    else:
        path = Path(_DOTENV_FALLBACK_PATH).expanduser()
    if not path.is_file():
        return {}
    raw_values = dotenv_values(str(path))
    return {str(key): str(value) for key, value in raw_values.items() if value is not None}


class BraveSearchSettings(BaseSettings):
    """Client configuration sourced from keyword overrides, JSON files, or the environment."""

    api_token: str | None = Field(
        default=None,
        description="Brave Search subscription token sent as X-Subscription-Token.",
        repr=False,
    )
    host: str = Field(
        default=DEFAULT_HOST,
        description="Base URL of the Brave Search API; a trailing slash is enforced.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Timeout applied by the HTTP transport to each request.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Log level used when no logging configuration file is present.",
    )

    model_config = cast(
        "SettingsConfigDict",
        {
            "env_prefix": ENV_PREFIX,
            "case_sensitive": False,
            "extra": "ignore",
        },
    )

    @field_validator("api_token", mode="before")
    def _strip_token(cls, value: object) -> str | None:
        """Normalise tokens by stripping whitespace and treating blanks as unset."""
        if value is None:
            return None
        stripped = str(value).strip()
        return stripped or None

    @field_validator("host", mode="before")
    def _normalise_host(cls, value: object) -> str:
        if value is None:
            return DEFAULT_HOST
        text = str(value).strip()
        if not text:
            return DEFAULT_HOST
        return normalise_host(text)

    @field_validator("timeout_seconds")
    def _validate_timeout(cls, value: float) -> float:
        """Ensure the transport timeout is a positive number of seconds."""
        if value <= 0:
            raise ValueError("timeout_seconds must be greater than zero")
        return value

    @field_validator("log_level", mode="before")
    def _normalise_log_level(cls, value: object) -> str:
        if value is None:
            return DEFAULT_LOG_LEVEL
        text = str(value).strip().upper()
        if not text:
            return DEFAULT_LOG_LEVEL
        if text not in _LOG_LEVELS:
            raise ValueError(
                "log_level must be one of: " + ", ".join(sorted(_LOG_LEVELS))
            )
        return text

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
        PydanticBaseSettingsSource,
    ]:
        """Define configuration source precedence.

        Order (highest → lowest):
            1. Explicit keyword arguments (e.g. load_settings(host="...")).
            2. JSON configuration file.
            3. Environment variables / aliases, then ``.env`` entries.
            4. File secrets.
        """

        def env_with_aliases(_: BaseSettings | None = None) -> dict[str, Any]:
            data: dict[str, Any] = {}
            dotenv_data = _read_dotenv_values()

            def _lookup(candidate: str) -> str | None:
                value = os.getenv(candidate)
                if value is None:
                    value = dotenv_data.get(candidate)
                if value is None:
                    return None
                stripped_value = str(value).strip()
                return stripped_value or None

            for field, (suffixes, aliases) in _ENV_ALIASES.items():
                candidates = [f"{ENV_PREFIX}{suffix}" for suffix in suffixes]
                candidates.extend(aliases)
                for candidate in candidates:
                    val = _lookup(candidate)
                    if val is not None:
                        data[field] = val
                        break
            return data

        return (
            init_settings,
            cls._json_config_settings_source(settings_cls),
            cast("PydanticBaseSettingsSource", env_with_aliases),
            file_secret_settings,
        )

    @classmethod
    def _json_config_settings_source(
        cls,
        _: type[BaseSettings],
    ) -> PydanticBaseSettingsSource:
        """Return settings extracted from an optional JSON config file."""

        def _loader(_: BaseSettings | None = None) -> dict[str, Any]:
            explicit_path = os.getenv(f"{ENV_PREFIX}CONFIG_JSON")
            if explicit_path:
                path = Path(explicit_path).expanduser()
                if not path.exists():
                    raise SettingsError(f"Configuration file not found: {path}")
            else:
                path = DEFAULT_CONFIG_PATH
                if not path.exists():
                    return {}
            try:
                raw_contents = path.read_text(encoding="utf-8")
            except OSError as exc:  # pragma: no cover - filesystem failure is env-specific
                raise SettingsError(f"Unable to read configuration file: {path}") from exc
            try:
                data = json.loads(raw_contents)
            except json.JSONDecodeError as exc:
                raise SettingsError(f"Invalid JSON in configuration file: {path}") from exc
            if not isinstance(data, dict):
                raise SettingsError(f"Configuration file {path} must contain a JSON object")
            mapping_data = cast("Mapping[object, Any]", data)
            data_dict: dict[str, Any] = {str(key): value for key, value in mapping_data.items()}

            removed_secrets = sorted(key for key in _JSON_SECRET_KEYS if key in data_dict)
            if removed_secrets:
                logger.warning(
                    "Ignoring secret key(s) %s in configuration file %s; "
                    "set credentials via environment variables instead.",
                    ", ".join(removed_secrets),
                    path,
                )
            return {key: data_dict[key] for key in _JSON_CONFIG_KEYS if key in data_dict}

        return cast("PydanticBaseSettingsSource", _loader)


def load_settings(**overrides: Any) -> BraveSearchSettings:
    """Return validated settings, raising SettingsError on failure."""
    try:
        return BraveSearchSettings(**overrides)
    except SettingsError:
        raise
    except ValidationError as exc:
        raise SettingsError("Invalid Brave Search configuration") from exc
