"""Pydantic schemas for the auth endpoints."""

from pydantic import Field

from src.db.enums import SystemRole
from src.schemas.common import ApiModel

# =============================================================================
# Session
# =============================================================================


class SessionUser(ApiModel):
    """The user behind the current session."""

    id: str = Field(description="User ID")
    name: str | None = Field(default=None, description="Display name")
    email: str = Field(description="Login email")
    roles: list[SystemRole] = Field(default_factory=list, description="Platform-wide roles")

    @property
    def is_admin(self) -> bool:
        return SystemRole.ADMIN in self.roles


class GetSessionResponse(ApiModel):
    """Response of GET /api/auth/session. `user` is absent when logged out."""

    user: SessionUser | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


# =============================================================================
# Login
# =============================================================================


class PostLoginRequest(ApiModel):
    """Body of POST /api/auth/login."""

    email: str
    password: str


# =============================================================================
# Invites
# =============================================================================


class GetInviteResponseBody(ApiModel):
    """Response of GET /api/auth/invite: the invited email address."""

    email: str


class PostInviteRequestBody(ApiModel):
    """Body of POST /api/auth/invite: accept an invite and set credentials."""

    token: str
    name: str
    password: str
