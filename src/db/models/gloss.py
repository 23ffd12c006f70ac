"""
Gloss models: the translation of a single word into a language.

- Gloss: the current translation, one row per (word, language)
- GlossHistoryEntry: append-only log of every change to a gloss
- MachineGloss: a machine-translated suggestion, one row per (word, language)

Every write to Gloss should add a GlossHistoryEntry in the same
transaction:

    async with transaction(session):
        gloss.gloss = "en el principio"
        gloss.approve()
        session.add(GlossHistoryEntry.record(gloss, GlossSource.USER, user.id))
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Index, Integer, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column

from src.db.base import Base, WordLanguageKeyMixin
from src.db.enums import GlossSource, GlossState

# Shared by Gloss and GlossHistoryEntry so the ENUM type is declared once
gloss_state_enum = Enum(GlossState, name="gloss_state")


class Gloss(WordLanguageKeyMixin, Base):
    """
    The current gloss of a word in a language.

    Attributes:
        word_id: The glossed word (primary key part)
        language_id: The target language (primary key part)
        gloss: Translated text, NULL when cleared
        state: APPROVED or UNAPPROVED
    """

    gloss: Mapped[str | None] = mapped_column(Text, nullable=True)

    state: Mapped[GlossState] = mapped_column(
        gloss_state_enum,
        nullable=False,
        default=GlossState.UNAPPROVED,
        server_default=GlossState.UNAPPROVED.value,
    )

    def __repr__(self) -> str:
        return f"<Gloss(word={self.word_id!r}, language={self.language_id}, state={self.state.value})>"

    def approve(self) -> None:
        self.state = GlossState.APPROVED

    def unapprove(self) -> None:
        self.state = GlossState.UNAPPROVED

    @property
    def is_approved(self) -> bool:
        return self.state == GlossState.APPROVED


class GlossHistoryEntry(Base):
    """
    One change to a gloss, kept for auditing.

    This table is append-only - entries are never updated or deleted except
    when their language is removed.

    Attributes:
        id: Autoincrement primary key
        word_id / language_id: The gloss that changed
        gloss / state: Snapshot of the gloss after the change
        timestamp: When the change happened
        user_id: Who made it (NULL for imports or deleted users)
        source: USER for edits, IMPORT for bulk imports
    """

    __tablename__ = "gloss_history_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    word_id: Mapped[str] = mapped_column(ForeignKey("words.id"), nullable=False)

    language_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("languages.id", ondelete="CASCADE"),
        nullable=False,
    )

    gloss: Mapped[str | None] = mapped_column(Text, nullable=True)

    state: Mapped[GlossState | None] = mapped_column(
        gloss_state_enum,
        nullable=True,
    )

    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    source: Mapped[GlossSource] = mapped_column(
        Enum(GlossSource, name="gloss_source"),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<GlossHistoryEntry(word={self.word_id!r}, source={self.source.value})>"

    @classmethod
    def record(
        cls,
        gloss: Gloss,
        source: GlossSource,
        user_id: uuid.UUID | None = None,
    ) -> "GlossHistoryEntry":
        """
        Snapshot a gloss into a new history entry.

        Args:
            gloss: The gloss after the change
            source: Whether a user or an import made the change
            user_id: The editing user, if any

        Returns:
            New GlossHistoryEntry (not yet added to a session)
        """
        return cls(
            word_id=gloss.word_id,
            language_id=gloss.language_id,
            gloss=gloss.gloss,
            state=gloss.state,
            user_id=user_id,
            source=source,
        )


class MachineGloss(WordLanguageKeyMixin, Base):
    """A machine-translated gloss suggestion for a word in a language."""

    gloss: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<MachineGloss(word={self.word_id!r}, language={self.language_id})>"


# === Indexes ===
# History of one gloss in chronological order
Index(
    "ix_gloss_history_entries_word_language_timestamp",
    GlossHistoryEntry.word_id,
    GlossHistoryEntry.language_id,
    GlossHistoryEntry.timestamp,
)

# Loading all glosses of a language (e.g. progress statistics)
Index("ix_glosses_language_id", Gloss.language_id)
