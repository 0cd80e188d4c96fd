"""HTTP client collaborator for the provider.

The provider only needs an awaitable ``(url, options) -> HttpResponse``.
Two httpx-backed implementations are provided:

- ``fetch_json`` opens a short-lived ``httpx.AsyncClient`` per call.
- ``HttpxJsonClient`` wraps a long-lived client for connection reuse.

Both send JSON headers, raise ``httpx.HTTPStatusError`` on non-2xx
responses and leave ``json`` as ``None`` when the body is not JSON.
Authentication is the caller's concern: pass headers or a preconfigured
``httpx.AsyncClient``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, NamedTuple, Protocol, TypedDict

import httpx

logger = logging.getLogger(__name__)


class HttpMethod:
    """HTTP verbs issued by the provider."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class RequestOptions(TypedDict, total=False):
    """Per-request options. ``body`` is an already-serialized JSON string."""

    method: str
    body: str
    headers: Mapping[str, str]


class HttpResponse(NamedTuple):
    """Parsed response handed back to the provider."""

    status: int
    headers: Mapping[str, str]
    body: str
    json: Any


class HttpClient(Protocol):
    """Anything the provider can await to perform a request."""

    async def __call__(
        self, url: str, options: RequestOptions | None = None
    ) -> HttpResponse: ...


def _build_headers(options: RequestOptions) -> dict[str, str]:
    headers = {"Accept": "application/json"}
    if options.get("body") is not None:
        headers["Content-Type"] = "application/json"
    headers.update(options.get("headers") or {})
    return headers


def _parse_json(response: httpx.Response) -> Any:
    """Return the decoded body, or ``None`` when it is empty or not JSON."""
    try:
        return response.json()
    except ValueError:
        return None


async def _send(
    client: httpx.AsyncClient,
    url: str,
    options: RequestOptions | None,
) -> HttpResponse:
    options = options or {}
    method = options.get("method", HttpMethod.GET)
    try:
        response = await client.request(
            method,
            url,
            content=options.get("body"),
            headers=_build_headers(options),
        )
        response.raise_for_status()
    except httpx.HTTPError as exc:
        logger.warning("Request failed: %s %s -> %s", method, url, exc)
        raise

    return HttpResponse(
        status=response.status_code,
        headers=response.headers,
        body=response.text,
        json=_parse_json(response),
    )


async def fetch_json(
    url: str,
    options: RequestOptions | None = None,
    *,
    timeout: float = 10.0,
) -> HttpResponse:
    """Perform one JSON request with a throwaway client.

    Args:
        url: Absolute request URL, query string included.
        options: Method, serialized body and extra headers.
        timeout: Request timeout in seconds.

    Returns:
        The response status, headers, raw body and decoded JSON.

    Raises:
        httpx.HTTPStatusError: If the service answers with a non-2xx status.
        httpx.HTTPError: On network failures and timeouts.
    """
    async with httpx.AsyncClient(timeout=timeout) as client:
        return await _send(client, url, options)


class HttpxJsonClient:
    """Reusable JSON client over a shared ``httpx.AsyncClient``.

    Args:
        client: Preconfigured client (auth, transport, base headers). A new
            one owned by this instance is created when omitted.
        timeout: Timeout for the owned client. Ignored when ``client`` is given.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(
        self, url: str, options: RequestOptions | None = None
    ) -> HttpResponse:
        return await _send(self._client, url, options)

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> HttpxJsonClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
