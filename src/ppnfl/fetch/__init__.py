"""Fetch strategies, strategy selection and the retry/backoff controller."""

from .errors import ConfigError, FetchError, NetworkError, UpstreamError, status_of
from .retry import call_with_backoff, is_retryable
from .strategies import StrategyChoice, build_fetcher, select_strategy

__all__ = [
    "ConfigError",
    "FetchError",
    "NetworkError",
    "UpstreamError",
    "status_of",
    "call_with_backoff",
    "is_retryable",
    "StrategyChoice",
    "build_fetcher",
    "select_strategy",
]
