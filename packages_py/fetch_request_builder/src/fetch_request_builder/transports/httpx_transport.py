"""
Transports backed by httpx.

Timeouts, pooling, proxies and TLS are whatever the wrapped httpx client is
configured with; pass your own client to control them.
"""
import logging
from typing import Dict, Optional

import httpx

from ..types import TransportResponse

logger = logging.getLogger("fetch_request_builder.httpx_transport")


class HttpxTransport:
    """Synchronous transport implementation over httpx.Client."""

    def __init__(self, httpx_client: Optional[httpx.Client] = None):
        self._owns_client = httpx_client is None
        self._client = httpx_client if httpx_client is not None else httpx.Client()
        self._closed = False

    def execute(
        self,
        verb: str,
        url: str,
        headers: Dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send the request; httpx errors propagate unchanged."""
        if self._closed:
            raise RuntimeError("Transport has been closed")

        logger.debug(f"HttpxTransport.execute: {verb} {url}")
        response = self._client.request(
            method=verb,
            url=url,
            headers=headers,
            content=body or None,
        )
        return TransportResponse(status=response.status_code, body=response.content)

    def close(self) -> None:
        """Close the transport, and the httpx client if it was created here."""
        self._closed = True
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncHttpxTransport:
    """Asynchronous transport implementation over httpx.AsyncClient."""

    def __init__(self, httpx_client: Optional[httpx.AsyncClient] = None):
        self._owns_client = httpx_client is None
        self._client = httpx_client if httpx_client is not None else httpx.AsyncClient()
        self._closed = False

    async def execute(
        self,
        verb: str,
        url: str,
        headers: Dict[str, str],
        body: bytes,
    ) -> TransportResponse:
        """Send the request; httpx errors propagate unchanged."""
        if self._closed:
            raise RuntimeError("Transport has been closed")

        logger.debug(f"AsyncHttpxTransport.execute: {verb} {url}")
        response = await self._client.request(
            method=verb,
            url=url,
            headers=headers,
            content=body or None,
        )
        return TransportResponse(status=response.status_code, body=response.content)

    async def close(self) -> None:
        """Close the transport, and the httpx client if it was created here."""
        self._closed = True
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncHttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
