"""
LanguageImportJob model for tracking a language's initial gloss import.

The primary key is the language ID, so a language has at most one job row.
Starting a new import reuses the row. The record only tracks status; the
import itself runs elsewhere.

Lifecycle:

    start() -> running (end_date is NULL)
            -> finish(True)  -> succeeded
            -> finish(False) -> failed
"""

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base

if TYPE_CHECKING:
    from src.db.models.language import Language


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LanguageImportJob(Base):
    """
    Import status of a single language.

    Attributes:
        language_id: The language being imported (primary key)
        user_id: Who started the import (nulled if the user is deleted)
        start_date: When the import started
        end_date: When it finished, NULL while running
        succeeded: Outcome, NULL while running

    Example:
        job = LanguageImportJob.begin(language.id, user.id)
        session.add(job)
        ...
        job.finish(succeeded=True)
    """

    language_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("languages.id", ondelete="CASCADE"),
        primary_key=True,
    )

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )

    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    end_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    succeeded: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    language: Mapped["Language"] = relationship("Language", back_populates="import_job")

    def __repr__(self) -> str:
        return f"<LanguageImportJob(language={self.language_id}, succeeded={self.succeeded})>"

    @classmethod
    def begin(cls, language_id: uuid.UUID, user_id: uuid.UUID | None = None) -> "LanguageImportJob":
        """Create a job row already marked as started."""
        job = cls(language_id=language_id, user_id=user_id)
        job.start(user_id)
        return job

    # === Status Management ===
    def start(self, user_id: uuid.UUID | None = None) -> None:
        """Mark the import as (re)started, clearing any previous outcome."""
        self.start_date = utcnow()
        self.end_date = None
        self.succeeded = None
        if user_id is not None:
            self.user_id = user_id

    def finish(self, succeeded: bool) -> None:
        """Record the end of the import and its outcome."""
        self.end_date = utcnow()
        self.succeeded = succeeded

    # === Properties ===
    @property
    def is_complete(self) -> bool:
        return self.end_date is not None

    @property
    def is_running(self) -> bool:
        return self.end_date is None

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time; measured to now while the import is running."""
        if self.start_date is None:
            return None
        end_time = self.end_date or utcnow()
        return (end_time - self.start_date).total_seconds()
