"""Failure taxonomy shared by the fetch strategies and the retry controller."""

from __future__ import annotations


class FetchError(Exception):
    """Base class for failures retrieving the upstream payload."""

    status: int = 0


class ConfigError(FetchError):
    """A strategy was bound without the credential it requires."""


class NetworkError(FetchError):
    """Timeout or connection failure; no HTTP status is available."""


class UpstreamError(FetchError):
    """Non-2xx response from the upstream or an intermediary service."""

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"upstream responded with status {status}")


def status_of(exc: BaseException) -> int:
    """Return the HTTP status a failure carries, or 0 when it has none."""

    status = getattr(exc, "status", 0)
    return status if isinstance(status, int) else 0
