"""
Session and credential records for AuthUser.

Both tables are keyed by opaque string IDs generated by the auth layer.
Expiry timestamps are stored as epoch milliseconds; the schema does not
expire anything on its own, callers compare against the current time.

Session lifecycle (times in ms):

    created ---- active_expires ---- idle_expires
       |  active    |      idle          |  expired
"""

import time
import uuid
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, ForeignKey, Index, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base

if TYPE_CHECKING:
    from src.db.models.user import AuthUser


def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)


class AuthSession(Base):
    """
    A login session.

    Attributes:
        id: Opaque session ID (also the cookie value)
        user_id: Owner of the session
        active_expires: Until this time the session is fully active
        idle_expires: Until this time an idle session may be renewed
    """

    id: Mapped[str] = mapped_column(String(127), primary_key=True)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    active_expires: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Epoch ms until which the session is active",
    )

    idle_expires: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Epoch ms until which an idle session can be renewed",
    )

    user: Mapped["AuthUser"] = relationship("AuthUser", back_populates="sessions")

    def __repr__(self) -> str:
        return f"<AuthSession(id={self.id[:8]!r}..., user={self.user_id})>"

    def is_active(self, at: int | None = None) -> bool:
        """Check if the session is within its active period."""
        at = now_ms() if at is None else at
        return at < self.active_expires

    def is_idle(self, at: int | None = None) -> bool:
        """Check if the session is past its active period but renewable."""
        at = now_ms() if at is None else at
        return self.active_expires <= at < self.idle_expires

    def is_expired(self, at: int | None = None) -> bool:
        """Check if the session can no longer be used or renewed."""
        at = now_ms() if at is None else at
        return at >= self.idle_expires


class AuthKey(Base):
    """
    A credential key linking an identifier to a user.

    Attributes:
        id: Provider-qualified identifier, e.g. "email:user@example.com"
        user_id: Owner of the key
        hashed_password: Password hash; null for keys without a password
            (e.g. a pending invite)
    """

    id: Mapped[str] = mapped_column(String(255), primary_key=True)

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    hashed_password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    user: Mapped["AuthUser"] = relationship("AuthUser", back_populates="keys")

    def __repr__(self) -> str:
        return f"<AuthKey(id={self.id!r})>"

    @staticmethod
    def email_key_id(email: str) -> str:
        """Build the key ID for an email/password credential."""
        return f"email:{email.strip().lower()}"

    @property
    def has_password(self) -> bool:
        return self.hashed_password is not None


# === Indexes ===
Index("ix_auth_sessions_user_id", AuthSession.user_id)
Index("ix_auth_keys_user_id", AuthKey.user_id)
