"""
Language model.

A Language is a translation target. Glosses, machine glosses, translator
notes and footnotes are all stored per (word, language); member roles grant
users access to it, and at most one import job tracks its initial gloss
import.
"""

from typing import TYPE_CHECKING

from sqlalchemy import Enum, String, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base, UUIDMixin
from src.db.enums import TextDirection

if TYPE_CHECKING:
    from src.db.models.language_import_job import LanguageImportJob
    from src.db.models.language_member_role import LanguageMemberRole

DEFAULT_FONT = "Noto Sans"


class Language(UUIDMixin, Base):
    """
    A translation target language.

    Attributes:
        id: UUID7 primary key
        code: Short language code used in URLs, e.g. "spa" (unique)
        name: Display name
        font: Font family used to render glosses
        text_direction: ltr or rtl
        bible_translation_ids: External Bible translations shown for reference

    Relationships:
        member_roles: Role grants of users on this language
        import_job: The language's import job, if one was ever started

    Example:
        language = Language(code="spa", name="Spanish")
    """

    code: Mapped[str] = mapped_column(
        String(8),
        unique=True,
        nullable=False,
        comment="Short language code used in URLs",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    font: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default=DEFAULT_FONT,
        server_default=DEFAULT_FONT,
    )

    text_direction: Mapped[TextDirection] = mapped_column(
        Enum(
            TextDirection,
            name="text_direction",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=TextDirection.LTR,
        server_default=TextDirection.LTR.value,
    )

    bible_translation_ids: Mapped[list[str]] = mapped_column(
        ARRAY(String(64)),
        nullable=False,
        default=list,
        server_default=text("'{}'"),
        comment="External Bible translations shown for reference",
    )

    # === Relationships ===
    member_roles: Mapped[list["LanguageMemberRole"]] = relationship(
        "LanguageMemberRole",
        back_populates="language",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    import_job: Mapped["LanguageImportJob"] = relationship(
        "LanguageImportJob",
        back_populates="language",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Language(code={self.code!r}, name={self.name!r})>"

    @property
    def is_rtl(self) -> bool:
        return self.text_direction == TextDirection.RTL
