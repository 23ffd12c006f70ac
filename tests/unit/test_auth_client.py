"""Unit tests for the auth endpoints of the REST client."""

import pytest

from src.client import ApiClient, ApiClientError
from src.db.enums import SystemRole
from tests.fakes import RecordingTransport


class TestSession:
    """Tests for Auth.session."""

    @pytest.mark.asyncio
    async def test_logged_in(
        self, api: ApiClient, transport: RecordingTransport, session_user: dict
    ) -> None:
        """Test a session with a user is parsed."""
        session_user["user"]["roles"] = ["ADMIN"]
        transport.add("GET", "/api/auth/session", json_body=session_user)

        session = await api.auth.session()

        assert transport.calls() == [("GET", "/api/auth/session")]
        assert session.is_authenticated
        assert session.user.email == "ana@example.com"
        assert session.user.roles == [SystemRole.ADMIN]
        assert session.user.is_admin

    @pytest.mark.asyncio
    async def test_logged_out(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test an empty session means no user."""
        transport.add("GET", "/api/auth/session", json_body={})

        session = await api.auth.session()

        assert session.user is None
        assert not session.is_authenticated


class TestLogin:
    """Tests for Auth.login and Auth.logout."""

    @pytest.mark.asyncio
    async def test_login_sends_single_post(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test login issues exactly one POST with email and password."""
        transport.add("POST", "/api/auth/login", status_code=204)

        result = await api.auth.login("ana@example.com", "secret")

        assert result is None
        assert transport.calls() == [("POST", "/api/auth/login")]
        assert transport.bodies() == [{"email": "ana@example.com", "password": "secret"}]
        assert transport.requests[0].headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_login_rejected(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test bad credentials surface as a 401 ApiClientError."""
        transport.add("POST", "/api/auth/login", status_code=401)

        with pytest.raises(ApiClientError) as exc_info:
            await api.auth.login("ana@example.com", "wrong")

        assert exc_info.value.status == 401
        assert exc_info.value.is_unauthorized

    @pytest.mark.asyncio
    async def test_login_stores_session_cookie(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test the session cookie set by the API is kept for later calls."""
        transport.add(
            "POST",
            "/api/auth/login",
            status_code=204,
            headers={"set-cookie": "auth_session=s3cr3t; Path=/; HttpOnly"},
        )
        transport.add("GET", "/api/auth/session", json_body={})

        await api.auth.login("ana@example.com", "secret")
        await api.auth.session()

        assert api.cookies.get("auth_session") == "s3cr3t"
        assert "auth_session=s3cr3t" in transport.requests[1].headers["cookie"]

    @pytest.mark.asyncio
    async def test_logout(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test logout posts without a body."""
        transport.add("POST", "/api/auth/logout", status_code=204)

        await api.auth.logout()

        assert transport.calls() == [("POST", "/api/auth/logout")]
        assert transport.bodies() == [None]


class TestInvites:
    """Tests for invite lookup and acceptance."""

    @pytest.mark.asyncio
    async def test_get_invite(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test the token is sent as a query parameter."""
        transport.add("GET", "/api/auth/invite", json_body={"email": "new@example.com"})

        invite = await api.auth.get_invite("tok-123")

        assert invite.email == "new@example.com"
        assert transport.requests[0].url.params["token"] == "tok-123"

    @pytest.mark.asyncio
    async def test_get_invite_unknown_token(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test an unknown token surfaces as a 404 ApiClientError."""
        with pytest.raises(ApiClientError) as exc_info:
            await api.auth.get_invite("missing")

        assert exc_info.value.is_not_found

    @pytest.mark.asyncio
    async def test_accept_invite_body(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test accepting an invite sends exactly token, name and password."""
        transport.add("POST", "/api/auth/invite", status_code=204)

        await api.auth.accept_invite("tok-123", "New User", "pa55word")

        assert transport.calls() == [("POST", "/api/auth/invite")]
        assert transport.bodies() == [
            {"token": "tok-123", "name": "New User", "password": "pa55word"}
        ]
