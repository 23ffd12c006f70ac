"""
LanguageMemberRole model - per-language role grants.

The primary key is (language_id, user_id, role), so grants are additive:
a user holds one row per role they have on a language. Replacing a member's
roles means deleting their rows and inserting the new set.
"""

import uuid
from collections.abc import Iterable
from typing import TYPE_CHECKING

from sqlalchemy import Enum, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base
from src.db.enums import LanguageRole

if TYPE_CHECKING:
    from src.db.models.language import Language
    from src.db.models.user import AuthUser


class LanguageMemberRole(Base):
    """
    A role granted to a user on a language.

    Example:
        session.add_all(
            LanguageMemberRole.grant(
                language.id, user.id, [LanguageRole.ADMIN, LanguageRole.TRANSLATOR]
            )
        )
    """

    language_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("languages.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    role: Mapped[LanguageRole] = mapped_column(
        Enum(LanguageRole, name="language_role"),
        primary_key=True,
    )

    language: Mapped["Language"] = relationship("Language", back_populates="member_roles")
    user: Mapped["AuthUser"] = relationship("AuthUser", back_populates="language_roles")

    def __repr__(self) -> str:
        return f"<LanguageMemberRole(language={self.language_id}, user={self.user_id}, role={self.role.value})>"

    @classmethod
    def grant(
        cls,
        language_id: uuid.UUID,
        user_id: uuid.UUID,
        roles: Iterable[LanguageRole],
    ) -> list["LanguageMemberRole"]:
        """Build one grant row per distinct role, in a stable order."""
        distinct = sorted(set(roles), key=lambda role: role.value)
        return [cls(language_id=language_id, user_id=user_id, role=role) for role in distinct]


# === Indexes ===
# Finding all languages a user is a member of
Index("ix_language_member_roles_user_id", LanguageMemberRole.user_id)
