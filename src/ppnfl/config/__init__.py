"""Configuration helpers for credentials, caching and retry limits."""

from .settings import Credentials, Settings

__all__ = [
    "Credentials",
    "Settings",
]
