"""Unit tests for the REST client transport and error handling."""

import httpx
import pytest

from src.client import ApiClient, ApiClientError
from tests.fakes import RecordingTransport


class TestApiClientError:
    """Tests for ApiClientError."""

    def test_message_includes_path_and_status(self) -> None:
        """Test the message names the failed request."""
        error = ApiClientError("/api/languages", 500)
        assert str(error) == "Request to /api/languages failed with status 500"

    def test_message_includes_body_message(self) -> None:
        """Test the API's error message is appended when present."""
        error = ApiClientError("/api/languages", 400, {"message": "Code taken"})
        assert str(error).endswith(": Code taken")

        error = ApiClientError("/api/languages", 422, {"detail": "Invalid code"})
        assert str(error).endswith(": Invalid code")

    def test_message_includes_text_body(self) -> None:
        """Test a plain-text error body is appended."""
        error = ApiClientError("/api/auth/login", 502, "Bad Gateway\n")
        assert str(error) == "Request to /api/auth/login failed with status 502: Bad Gateway"

    def test_status_properties(self) -> None:
        """Test status helper properties."""
        assert ApiClientError("/", 401).is_unauthorized
        assert ApiClientError("/", 403).is_forbidden
        assert ApiClientError("/", 404).is_not_found
        assert not ApiClientError("/", 500).is_unauthorized


class TestApiClientRequests:
    """Tests for request issuing and response parsing."""

    @pytest.mark.asyncio
    async def test_get_parses_json(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test JSON responses are returned parsed."""
        transport.add("GET", "/api/languages", json_body={"data": []})

        assert await api.get("/api/languages") == {"data": []}
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_empty_response_returns_none(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test a 204 with no body parses to None."""
        transport.add("POST", "/api/auth/logout", status_code=204)

        assert await api.post("/api/auth/logout") is None

    @pytest.mark.asyncio
    async def test_text_response_returned_as_text(self) -> None:
        """Test non-JSON bodies are returned as text."""
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, text="pong")),
            base_url="http://api.test",
        )
        async with ApiClient(http_client=http_client) as client:
            assert await client.get("/ping") == "pong"
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_body_omitted_when_none(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test requests without a body send no content."""
        transport.add("POST", "/api/auth/logout", status_code=204)

        await api.post("/api/auth/logout")

        assert transport.requests[0].content == b""

    @pytest.mark.asyncio
    async def test_query_parameters(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test query parameters are encoded into the URL."""
        transport.add("GET", "/api/auth/invite", json_body={"email": "a@example.com"})

        await api.get("/api/auth/invite", query={"token": "a b&c"})

        assert transport.requests[0].url.params["token"] == "a b&c"

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test a non-2xx status raises ApiClientError with the parsed body."""
        transport.add("DELETE", "/api/languages/spa/members/u1", status_code=403, json_body={"message": "Forbidden"})

        with pytest.raises(ApiClientError) as exc_info:
            await api.delete("/api/languages/spa/members/u1")

        assert exc_info.value.status == 403
        assert exc_info.value.body == {"message": "Forbidden"}
        assert exc_info.value.path == "/api/languages/spa/members/u1"

    @pytest.mark.asyncio
    async def test_no_retry_on_failure(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test a failing call issues exactly one request."""
        transport.add("GET", "/api/languages", status_code=503)

        with pytest.raises(ApiClientError):
            await api.get("/api/languages")

        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self) -> None:
        """Test connection failures surface as httpx errors."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(refuse), base_url="http://api.test")
        async with ApiClient(http_client=http_client) as client:
            with pytest.raises(httpx.ConnectError):
                await client.get("/api/auth/session")
        await http_client.aclose()


class TestApiClientLifecycle:
    """Tests for client ownership and cookies."""

    @pytest.mark.asyncio
    async def test_borrowed_client_left_open(self) -> None:
        """Test an injected httpx client is not closed by ApiClient."""
        http_client = httpx.AsyncClient(base_url="http://api.test")
        async with ApiClient(http_client=http_client):
            pass
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_owned_client_closed(self) -> None:
        """Test a client created by ApiClient is closed with it."""
        api = ApiClient(base_url="http://api.test", timeout=5)
        await api.aclose()
        assert api._client.is_closed

    @pytest.mark.asyncio
    async def test_cookies_sent_with_requests(self, transport: RecordingTransport) -> None:
        """Test initial cookies are sent on every request."""
        transport.add("GET", "/api/auth/session", json_body={})
        http_client = httpx.AsyncClient(
            transport=httpx.MockTransport(transport.handler),
            base_url="http://api.test",
        )
        async with ApiClient(cookies={"auth_session": "abc"}, http_client=http_client) as client:
            await client.auth.session()
        await http_client.aclose()

        assert "auth_session=abc" in transport.requests[0].headers["cookie"]
