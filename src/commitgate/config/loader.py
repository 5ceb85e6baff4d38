"""
Configuration loader for commitgate.

Settings are read once at startup from the process environment, after
optionally loading a ``.env`` file with python-dotenv. The result is an
immutable :class:`Settings` value that the CLI passes to every
component; nothing else in the package looks at ``os.environ``.

Recognised variables
--------------------
``USE_LOCAL_MODEL``
    ``true`` selects the local Ollama backend instead of the hosted API.
``OPEN_AI_KEY_FOR_COMMIT``
    Credential for the hosted API.
``OPEN_AI_MODEL`` / ``LOCAL_MODEL_NAME``
    Model name overrides for the hosted and local backend.
``COMMITGATE_ENV``
    ``production`` makes backend error logging terse.
``OPENAI_API_URL`` / ``LOCAL_MODEL_API_URL``
    Endpoint overrides.
``COMMITGATE_STRICT``
    ``true`` enables the strict file filter and redaction.

A malformed endpoint override raises :class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional
from urllib.parse import urlparse

from dotenv import find_dotenv, load_dotenv


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


DEFAULT_OPENAI_MODEL = "gpt-4o-mini"
DEFAULT_LOCAL_MODEL = "deepseek-r1"
DEFAULT_OPENAI_API_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_LOCAL_MODEL_API_URL = "http://localhost:11434/api/chat"
PRODUCTION = "production"


class ConfigError(Exception):
    """Raised when an environment setting has an invalid value."""

    pass


@dataclass(frozen=True)
class Settings:
    """Startup configuration shared by every pipeline component."""

    use_local_model: bool = False
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL
    local_model_name: str = DEFAULT_LOCAL_MODEL
    openai_api_url: str = DEFAULT_OPENAI_API_URL
    local_model_api_url: str = DEFAULT_LOCAL_MODEL_API_URL
    environment: str = "development"
    strict: bool = False

    @property
    def verbose_errors(self) -> bool:
        """Full backend error detail is logged outside production only."""
        return self.environment != PRODUCTION


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() == "true"


def _url(name: str, value: Optional[str], default: str) -> str:
    if not value:
        return default
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"'{name}' must be an http(s) URL, got {value!r}")
    return value


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> Settings:
    """Build :class:`Settings` from the environment.

    Args:
        environ: Mapping to read instead of the process environment. When
            given, no ``.env`` file is loaded.
        env_file: Explicit ``.env`` path. Defaults to python-dotenv's
            search from the current directory. Variables already present
            in the environment are never overridden.

    Returns:
        The validated settings.

    Raises:
        ConfigError: If an endpoint override is not an http(s) URL.
    """
    if environ is None:
        dotenv_path = env_file if env_file is not None else find_dotenv(usecwd=True)
        loaded = load_dotenv(dotenv_path=dotenv_path, override=False)
        logger.debug("Loaded .env file: %s", loaded)
        environ = os.environ

    settings = Settings(
        use_local_model=_flag(environ.get("USE_LOCAL_MODEL")),
        openai_api_key=environ.get("OPEN_AI_KEY_FOR_COMMIT", "") or "",
        openai_model=environ.get("OPEN_AI_MODEL") or DEFAULT_OPENAI_MODEL,
        local_model_name=environ.get("LOCAL_MODEL_NAME") or DEFAULT_LOCAL_MODEL,
        openai_api_url=_url("OPENAI_API_URL", environ.get("OPENAI_API_URL"), DEFAULT_OPENAI_API_URL),
        local_model_api_url=_url(
            "LOCAL_MODEL_API_URL", environ.get("LOCAL_MODEL_API_URL"), DEFAULT_LOCAL_MODEL_API_URL
        ),
        environment=environ.get("COMMITGATE_ENV") or "development",
        strict=_flag(environ.get("COMMITGATE_STRICT")),
    )
    logger.debug(
        "Settings: local=%s model=%s strict=%s env=%s",
        settings.use_local_model,
        settings.local_model_name if settings.use_local_model else settings.openai_model,
        settings.strict,
        settings.environment,
    )
    return settings
