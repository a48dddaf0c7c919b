#!/usr/bin/env python3
"""
HTTP client utilities for the weather tools.
Provides a shared HTTP client with proper timeouts and headers.
"""

import httpx

from config import Config

_http_client: httpx.AsyncClient = None


def build_http_client() -> httpx.AsyncClient:
    """Create an HTTP client with the configured timeouts and headers."""
    timeout = httpx.Timeout(Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT)
    headers = {"User-Agent": Config.USER_AGENT}
    return httpx.AsyncClient(timeout=timeout, headers=headers)


def get_http_client() -> httpx.AsyncClient:
    """Get the shared HTTP client instance."""
    global _http_client
    if _http_client is None:
        _http_client = build_http_client()
    return _http_client


async def close_http_client():
    """Close the shared HTTP client."""
    global _http_client
    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
