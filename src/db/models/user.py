"""
User identity models.

An AuthUser is created on signup (or when accepting an invite). It owns its
sessions, credential keys and role grants; deleting the user removes all of
them through ON DELETE CASCADE.
"""

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, String
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base, CreatedAtMixin, UUIDMixin
from src.db.enums import EmailStatus, SystemRole

if TYPE_CHECKING:
    from src.db.models.auth import AuthKey, AuthSession
    from src.db.models.language_member_role import LanguageMemberRole


class AuthUser(UUIDMixin, CreatedAtMixin, Base):
    """
    A registered user of the platform.

    Attributes:
        id: UUID7 primary key
        email: Login email, stored lowercased (unique)
        name: Display name (null until an invite is accepted)
        email_status: Deliverability of the email address
        created_at: When the user was created

    Relationships:
        sessions: Active and idle login sessions
        keys: Credential keys (email/password)
        system_roles: Platform-wide role grants
        language_roles: Per-language role grants
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(320),
        unique=True,
        nullable=False,
        comment="Login email, lowercased",
    )

    name: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
        comment="Display name",
    )

    email_status: Mapped[EmailStatus] = mapped_column(
        Enum(EmailStatus, name="email_status"),
        nullable=False,
        default=EmailStatus.UNVERIFIED,
        server_default=EmailStatus.UNVERIFIED.value,
    )

    # === Relationships ===
    sessions: Mapped[list["AuthSession"]] = relationship(
        "AuthSession",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    keys: Mapped[list["AuthKey"]] = relationship(
        "AuthKey",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    system_roles: Mapped[list["UserSystemRole"]] = relationship(
        "UserSystemRole",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    language_roles: Mapped[list["LanguageMemberRole"]] = relationship(
        "LanguageMemberRole",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<AuthUser(email={self.email!r})>"

    @staticmethod
    def normalize_email(email: str) -> str:
        """Emails are compared case-insensitively, so store them lowercased."""
        return email.strip().lower()

    def has_system_role(self, role: SystemRole) -> bool:
        """Check if the user holds a platform-wide role."""
        return any(grant.role == role for grant in self.system_roles)

    @property
    def is_platform_admin(self) -> bool:
        return self.has_system_role(SystemRole.ADMIN)


class UserSystemRole(Base):
    """A platform-wide role grant. Keyed by (user_id, role)."""

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    role: Mapped[SystemRole] = mapped_column(
        Enum(SystemRole, name="system_role"),
        primary_key=True,
    )

    user: Mapped["AuthUser"] = relationship("AuthUser", back_populates="system_roles")

    def __repr__(self) -> str:
        return f"<UserSystemRole(user={self.user_id}, role={self.role.value})>"
