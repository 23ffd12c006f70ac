"""
Authored notes attached to a word in a language.

- TranslatorNote: internal notes shared between translators
- Footnote: notes published alongside the translation

Both are keyed by (word_id, language_id) and record who last wrote them.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, WordLanguageKeyMixin


class AuthoredContentMixin:
    """Author, timestamp and content columns shared by notes and footnotes."""

    author_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def revise(self, author_id: uuid.UUID, content: str) -> None:
        """Replace the content and stamp the new author and time."""
        self.author_id = author_id
        self.content = content
        self.timestamp = datetime.now(timezone.utc)

    @property
    def is_blank(self) -> bool:
        return not self.content.strip()


class TranslatorNote(WordLanguageKeyMixin, AuthoredContentMixin, Base):
    """An internal translator note on a word."""

    def __repr__(self) -> str:
        return f"<TranslatorNote(word={self.word_id!r}, language={self.language_id})>"


class Footnote(WordLanguageKeyMixin, AuthoredContentMixin, Base):
    """A published footnote on a word."""

    def __repr__(self) -> str:
        return f"<Footnote(word={self.word_id!r}, language={self.language_id})>"
