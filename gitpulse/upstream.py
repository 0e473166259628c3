"""Shared httpx client for upstream lookups."""

import httpx
from fastapi import Request

from .config import HTTP_TIMEOUT_S, USER_AGENT


def build_async_client(*, transport: httpx.AsyncBaseTransport | None = None,
                       timeout: float = HTTP_TIMEOUT_S) -> httpx.AsyncClient:
    """Create the client every sub-fetch goes through.

    One instance serves concurrent lookups; its connection pool is the only
    state shared between them.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers={"User-Agent": USER_AGENT},
        transport=transport,
    )


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
