"""httpx client construction for the verification API."""

from typing import Any

import httpx

DEFAULT_BASE_URI = "https://api.xverify.com/v2/"
DEFAULT_TIMEOUT = 5


def default_transport_options(base_uri: str = DEFAULT_BASE_URI) -> dict[str, Any]:
    return {
        "base_url": base_uri,
        "timeout": DEFAULT_TIMEOUT,
        "headers": {"Content-Type": "application/json"},
    }


def build_http_client(
    base_uri: str = DEFAULT_BASE_URI,
    config_options: dict[str, Any] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` from defaults merged with caller overrides.

    Overrides win on key collision and are merged shallowly, so a
    `headers` override replaces the default header map. Any other
    `httpx.Client` keyword (`transport`, `event_hooks`, `proxy`, ...) is
    passed through untouched; invalid ones fail here, in httpx.
    """
    options = {**default_transport_options(base_uri), **(config_options or {})}
    return httpx.Client(**options)
