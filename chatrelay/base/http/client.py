"""HTTP client construction for provider adapters.

Each adapter owns exactly one ``httpx.Client``, built once in its constructor
and reused for every call. Tests pass an ``httpx.MockTransport`` through
``transport`` to stub the network.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx


def build_httpx_client(
    *,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """Return a new ``httpx.Client`` configured for one adapter.

    Parameters:
        base_url: Base URL for relative request paths; omitted when ``None``.
        timeout: Connect/read timeout in seconds (``None`` keeps httpx's default).
        headers: Default headers sent with every request.
        transport: Optional transport override (``httpx.MockTransport`` in tests).
    """
    kwargs = {"headers": dict(headers or {})}
    if base_url:
        kwargs["base_url"] = base_url
    if timeout is not None:
        kwargs["timeout"] = timeout
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.Client(**kwargs)


def sdk_http_client(timeout: Optional[float], transport: Optional[httpx.BaseTransport]) -> Optional[httpx.Client]:
    """Return an ``httpx.Client`` for an SDK only when a transport override is given.

    The openai and anthropic SDKs accept ``http_client=``; without an override
    they build their own client and this returns ``None``.
    """
    if transport is None:
        return None
    return build_httpx_client(timeout=timeout, transport=transport)


__all__ = ["build_httpx_client", "sdk_http_client"]
