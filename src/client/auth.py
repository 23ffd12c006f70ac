"""Auth endpoints: session, login, logout and invites."""

from typing import TYPE_CHECKING

from src.schemas.auth import (
    GetInviteResponseBody,
    GetSessionResponse,
    PostInviteRequestBody,
    PostLoginRequest,
)

if TYPE_CHECKING:
    from src.client.client import ApiClient


class Auth:
    """Maps the /api/auth endpoints onto methods, one request per call."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    async def session(self) -> GetSessionResponse:
        """Fetch the current session. Logged-out callers get `user=None`."""
        data = await self.client.get("/api/auth/session")
        return GetSessionResponse.model_validate(data or {})

    async def login(self, email: str, password: str) -> None:
        """Log in; the API sets the session cookie on success (401 on bad credentials)."""
        body = PostLoginRequest(email=email, password=password)
        await self.client.post("/api/auth/login", body=body.to_body())

    async def logout(self) -> None:
        await self.client.post("/api/auth/logout")

    async def get_invite(self, token: str) -> GetInviteResponseBody:
        """Look up the email address an invite token was issued to."""
        data = await self.client.get("/api/auth/invite", query={"token": token})
        return GetInviteResponseBody.model_validate(data)

    async def accept_invite(self, token: str, name: str, password: str) -> None:
        """Accept an invite, setting the new user's name and password."""
        body = PostInviteRequestBody(token=token, name=name, password=password)
        await self.client.post("/api/auth/invite", body=body.to_body())
