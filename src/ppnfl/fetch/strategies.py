"""Interchangeable network paths for retrieving the raw projections payload."""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Any, Awaitable, Callable, Mapping

import httpx

from ppnfl.config import Credentials
from ppnfl.fetch.errors import ConfigError, NetworkError, UpstreamError


TARGET_URL = "https://api.prizepicks.com/projections?league_id=7&per_page=250"
ZENROWS_URL = "https://api.zenrows.com/v1/"
SCRAPERAPI_URL = "http://api.scraperapi.com"

DEFAULT_HEADERS: Mapping[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Origin": "https://app.prizepicks.com",
    "Referer": "https://app.prizepicks.com/",
}

BYPASS_TIMEOUT_SECONDS = 25.0
PROXY_TIMEOUT_SECONDS = 20.0
DIRECT_TIMEOUT_SECONDS = 15.0

Fetcher = Callable[[], Awaitable[Any]]


class StrategyChoice(str, Enum):
    ZENROWS = "zenrows"
    SCRAPERAPI = "scraperapi"
    RESIDENTIAL_PROXY = "residential_proxy"
    DIRECT = "direct"


def select_strategy(credentials: Credentials) -> StrategyChoice:
    """Pick the highest-priority strategy whose credential is configured."""

    if credentials.zenrows_api_key:
        return StrategyChoice.ZENROWS
    if credentials.scraperapi_key:
        return StrategyChoice.SCRAPERAPI
    if credentials.residential_proxy:
        return StrategyChoice.RESIDENTIAL_PROXY
    return StrategyChoice.DIRECT


async def _get_json(
    url: str,
    *,
    timeout: float,
    params: Mapping[str, str] | None = None,
    proxy: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    host = httpx.URL(url).host
    try:
        client = httpx.AsyncClient(
            headers=dict(DEFAULT_HEADERS),
            timeout=timeout,
            proxy=proxy,
            transport=transport,
        )
    except (ValueError, httpx.InvalidURL) as exc:
        raise ConfigError(f"invalid proxy URL: {exc}") from exc

    try:
        async with client:
            response = await client.get(url, params=params)
    except httpx.TimeoutException as exc:
        raise NetworkError(f"timed out after {timeout:g}s requesting {host}") from exc
    except httpx.RequestError as exc:
        raise NetworkError(f"request to {host} failed: {exc}") from exc

    if not response.is_success:
        raise UpstreamError(
            response.status_code,
            f"Request failed with status code {response.status_code}",
        )
    try:
        return response.json()
    except ValueError as exc:
        # Bypass services answer 200 with an HTML challenge page when rendering fails.
        raise UpstreamError(502, f"{host} returned a non-JSON body") from exc


async def fetch_via_zenrows(api_key: str, *, transport: httpx.AsyncBaseTransport | None = None) -> Any:
    params = {
        "apikey": api_key,
        "url": TARGET_URL,
        "js_render": "true",
        "smart_proxy": "true",
        "premium_proxy": "true",
    }
    return await _get_json(ZENROWS_URL, params=params, timeout=BYPASS_TIMEOUT_SECONDS, transport=transport)


async def fetch_via_scraperapi(api_key: str, *, transport: httpx.AsyncBaseTransport | None = None) -> Any:
    params = {
        "api_key": api_key,
        "url": TARGET_URL,
        "render": "true",
        "country": "us",
        "keep_headers": "true",
    }
    return await _get_json(SCRAPERAPI_URL, params=params, timeout=BYPASS_TIMEOUT_SECONDS, transport=transport)


async def fetch_via_residential_proxy(
    proxy_url: str, *, transport: httpx.AsyncBaseTransport | None = None
) -> Any:
    return await _get_json(TARGET_URL, proxy=proxy_url, timeout=PROXY_TIMEOUT_SECONDS, transport=transport)


async def fetch_direct(*, transport: httpx.AsyncBaseTransport | None = None) -> Any:
    return await _get_json(TARGET_URL, timeout=DIRECT_TIMEOUT_SECONDS, transport=transport)


def build_fetcher(
    choice: StrategyChoice,
    credentials: Credentials,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Fetcher:
    """Bind ``choice`` to its credential and return a zero-argument fetch.

    Raises ConfigError when the credential the strategy needs is absent, which
    only happens if the caller did not go through :func:`select_strategy`.
    """

    if choice is StrategyChoice.ZENROWS:
        key = credentials.zenrows_api_key
        if not key:
            raise ConfigError("ZENROWS_API_KEY not set")
        return partial(fetch_via_zenrows, key, transport=transport)
    if choice is StrategyChoice.SCRAPERAPI:
        key = credentials.scraperapi_key
        if not key:
            raise ConfigError("SCRAPERAPI_KEY not set")
        return partial(fetch_via_scraperapi, key, transport=transport)
    if choice is StrategyChoice.RESIDENTIAL_PROXY:
        proxy_url = credentials.residential_proxy
        if not proxy_url:
            raise ConfigError("RESIDENTIAL_PROXY not set")
        return partial(fetch_via_residential_proxy, proxy_url, transport=transport)
    return partial(fetch_direct, transport=transport)
