"""Shared HTTP client factory for the Hacker News API."""

from __future__ import annotations

import httpx


def create_http_client(
    *,
    base_url: str,
    user_agent: str,
    proxy_url: str | None = None,
    timeout: float = 10.0,
) -> httpx.Client:
    """Create an httpx.Client bound to the API base URL with a JSON Accept header."""
    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    return httpx.Client(
        base_url=base_url,
        headers=headers,
        timeout=timeout,
        proxy=proxy_url,
    )
