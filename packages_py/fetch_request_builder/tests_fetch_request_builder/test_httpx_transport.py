"""
Tests for httpx_transport.py (both async and sync transports)
Logic testing: Decision/Branch, State Transition, Error Path
"""
import httpx
import pytest

from fetch_request_builder.core.request_spec import new_builder
from fetch_request_builder.transports.httpx_transport import AsyncHttpxTransport, HttpxTransport
from fetch_request_builder.types import TransportResponse


def make_handler(captured, status=200, content=b'{"id": 1}'):
    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["headers"] = dict(request.headers)
        captured["content"] = request.content
        return httpx.Response(status, content=content)
    return handler


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestHttpxTransport:
    """Tests for HttpxTransport."""

    def test_execute(self):
        captured = {}
        client = httpx.Client(transport=httpx.MockTransport(make_handler(captured, 201)))
        transport = HttpxTransport(client)

        response = transport.execute("POST", "http://host/users", {"X-Trace": "1"}, b'{"a":1}')

        assert response == TransportResponse(status=201, body=b'{"id": 1}')
        assert captured["method"] == "POST"
        assert captured["url"] == "http://host/users"
        assert captured["headers"]["x-trace"] == "1"
        assert captured["content"] == b'{"a":1}'

    # Boundary: empty body sends no content
    def test_execute_empty_body(self):
        captured = {}
        client = httpx.Client(transport=httpx.MockTransport(make_handler(captured)))

        HttpxTransport(client).execute("GET", "http://host/", {}, b"")

        assert captured["content"] == b""
        assert "content-length" not in captured["headers"]

    def test_execute_error_propagates(self):
        client = httpx.Client(transport=httpx.MockTransport(failing_handler))
        with pytest.raises(httpx.ConnectError):
            HttpxTransport(client).execute("GET", "http://host/", {}, b"")

    def test_status_returned_verbatim(self):
        client = httpx.Client(transport=httpx.MockTransport(make_handler({}, 503, b"down")))
        response = HttpxTransport(client).execute("GET", "http://host/", {}, b"")
        assert response.status == 503
        assert response.body == b"down"

    # State: execute after close
    def test_execute_after_close(self):
        client = httpx.Client(transport=httpx.MockTransport(make_handler({})))
        transport = HttpxTransport(client)
        transport.close()

        with pytest.raises(RuntimeError, match="Transport has been closed"):
            transport.execute("GET", "http://host/", {}, b"")

    # Decision: injected client is left open
    def test_close_keeps_injected_client(self):
        client = httpx.Client(transport=httpx.MockTransport(make_handler({})))
        with HttpxTransport(client):
            pass
        assert client.is_closed is False
        client.close()

    def test_close_owned_client(self):
        transport = HttpxTransport()
        transport.close()
        assert transport._client.is_closed is True

    def test_end_to_end_dispatch(self, settings):
        captured = {}
        client = httpx.Client(transport=httpx.MockTransport(make_handler(captured)))

        with HttpxTransport(client) as transport:
            result = (
                new_builder()
                .get()
                .with_url("http://host/users/")
                .with_id("42")
                .with_query_param("expand", "teams")
                .with_basic_auth("user", "pass")
                .build()
                .dispatch(transport, settings)
            )

        assert result.status == 200
        assert result.body == b'{"id": 1}'
        assert captured["url"] == "http://host/users/42?expand=teams"
        assert captured["headers"]["authorization"] == "Basic dXNlcjpwYXNz"


class TestAsyncHttpxTransport:
    """Tests for AsyncHttpxTransport."""

    @pytest.mark.asyncio
    async def test_execute(self):
        captured = {}
        client = httpx.AsyncClient(transport=httpx.MockTransport(make_handler(captured)))
        transport = AsyncHttpxTransport(client)

        response = await transport.execute("PUT", "http://host/users/1", {}, b"x")

        assert response.status == 200
        assert captured["method"] == "PUT"
        assert captured["content"] == b"x"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_execute_error_propagates(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(failing_handler))
        with pytest.raises(httpx.ConnectError):
            await AsyncHttpxTransport(client).execute("GET", "http://host/", {}, b"")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_execute_after_close(self):
        transport = AsyncHttpxTransport()
        await transport.close()

        assert transport._client.is_closed is True
        with pytest.raises(RuntimeError, match="Transport has been closed"):
            await transport.execute("GET", "http://host/", {}, b"")

    @pytest.mark.asyncio
    async def test_context_manager_keeps_injected_client(self):
        client = httpx.AsyncClient(transport=httpx.MockTransport(make_handler({})))
        async with AsyncHttpxTransport(client):
            pass
        assert client.is_closed is False
        await client.aclose()

    @pytest.mark.asyncio
    async def test_end_to_end_dispatch_async(self, settings):
        captured = {}
        client = httpx.AsyncClient(transport=httpx.MockTransport(make_handler(captured)))

        async with AsyncHttpxTransport(client) as transport:
            result = await (
                new_builder()
                .post()
                .with_url("http://host/users")
                .with_body_param("name", "n")
                .dispatch_async(transport, settings)
            )
        await client.aclose()

        assert result.status == 200
        assert captured["content"] == b'{"name":"n"}'
        assert captured["headers"]["content-type"] == "application/json"
