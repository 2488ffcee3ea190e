"""Environment-sourced settings, resolved once at startup."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional


logger = logging.getLogger("uvicorn.error")

_PORT_ENV = "PORT"
_ZENROWS_ENV = "ZENROWS_API_KEY"
_SCRAPERAPI_ENV = "SCRAPERAPI_KEY"
_PROXY_ENV = "RESIDENTIAL_PROXY"
_CACHE_TTL_ENV = "CACHE_TTL"
_BACKOFF_ATTEMPTS_ENV = "BACKOFF_ATTEMPTS"

_PORT_DEFAULT = 8080
_CACHE_TTL_DEFAULT = 60
_BACKOFF_ATTEMPTS_DEFAULT = 4


def _env_str(environ: Mapping[str, str], name: str) -> str:
    return (environ.get(name) or "").strip()


def _env_int(environ: Mapping[str, str], name: str, default: int, *, min_value: int | None = None) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class Credentials:
    """Optional credentials for the fetch strategies; empty means absent."""

    zenrows_api_key: str = ""
    scraperapi_key: str = ""
    residential_proxy: str = ""


@dataclass(frozen=True)
class Settings:
    port: int = _PORT_DEFAULT
    credentials: Credentials = field(default_factory=Credentials)
    cache_ttl: int = _CACHE_TTL_DEFAULT
    backoff_attempts: int = _BACKOFF_ATTEMPTS_DEFAULT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read settings from ``environ`` (``os.environ`` when omitted)."""

        env = os.environ if environ is None else environ
        return cls(
            port=_env_int(env, _PORT_ENV, _PORT_DEFAULT, min_value=0),
            credentials=Credentials(
                zenrows_api_key=_env_str(env, _ZENROWS_ENV),
                scraperapi_key=_env_str(env, _SCRAPERAPI_ENV),
                residential_proxy=_env_str(env, _PROXY_ENV),
            ),
            cache_ttl=_env_int(env, _CACHE_TTL_ENV, _CACHE_TTL_DEFAULT, min_value=0),
            backoff_attempts=_env_int(env, _BACKOFF_ATTEMPTS_ENV, _BACKOFF_ATTEMPTS_DEFAULT, min_value=1),
        )
