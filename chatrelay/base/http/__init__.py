"""HTTP helpers for the providers layer."""

from .client import build_httpx_client, sdk_http_client

__all__ = ["build_httpx_client", "sdk_http_client"]
