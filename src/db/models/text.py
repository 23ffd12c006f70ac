"""
Biblical text hierarchy: Book -> Verse -> Word.

The reference text is loaded once and never modified, so these tables use
natural identifiers instead of UUIDs:

- Book: canonical book number (1 = Genesis ... 66 = Revelation)
- Verse: "BBCCCVVV", e.g. "01001001" for Genesis 1:1
- Word: verse ID plus a two-digit position, e.g. "0100100101"

A Word is the unit that gets glossed and annotated.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base

if TYPE_CHECKING:
    from src.db.models.lemma import LemmaForm


class Book(Base):
    """A book of the Bible."""

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)

    verses: Mapped[list["Verse"]] = relationship(
        "Verse",
        back_populates="book",
        order_by="Verse.id",
    )

    def __repr__(self) -> str:
        return f"<Book(id={self.id}, name={self.name!r})>"


class Verse(Base):
    """A verse, identified by book, chapter and verse number."""

    id: Mapped[str] = mapped_column(String(8), primary_key=True)

    book_id: Mapped[int] = mapped_column(ForeignKey("books.id"), nullable=False)
    chapter: Mapped[int] = mapped_column(Integer, nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)

    book: Mapped["Book"] = relationship("Book", back_populates="verses")
    words: Mapped[list["Word"]] = relationship(
        "Word",
        back_populates="verse",
        order_by="Word.id",
    )

    __table_args__ = (
        UniqueConstraint("book_id", "chapter", "number", name="uq_verses_book_chapter_number"),
    )

    def __repr__(self) -> str:
        return f"<Verse(id={self.id!r})>"

    @staticmethod
    def make_id(book_id: int, chapter: int, number: int) -> str:
        """Build a verse ID: Genesis 1:1 -> "01001001"."""
        return f"{book_id:02d}{chapter:03d}{number:03d}"

    @property
    def reference(self) -> str:
        """Human-readable "chapter:verse" reference."""
        return f"{self.chapter}:{self.number}"


class Word(Base):
    """A single word of the original-language text."""

    id: Mapped[str] = mapped_column(String(10), primary_key=True)

    verse_id: Mapped[str] = mapped_column(ForeignKey("verses.id"), nullable=False)

    text: Mapped[str] = mapped_column(Text, nullable=False, comment="Surface text of the word")

    form_id: Mapped[str] = mapped_column(
        ForeignKey("lemma_forms.id"),
        nullable=False,
        comment="The inflected form this word is an instance of",
    )

    verse: Mapped["Verse"] = relationship("Verse", back_populates="words")
    form: Mapped["LemmaForm"] = relationship("LemmaForm", back_populates="words")

    def __repr__(self) -> str:
        return f"<Word(id={self.id!r}, text={self.text!r})>"

    @staticmethod
    def make_id(verse_id: str, position: int) -> str:
        """Build a word ID from its verse and 1-based position."""
        return f"{verse_id}{position:02d}"

    @property
    def position(self) -> int:
        return int(self.id[-2:])


# === Indexes ===
Index("ix_verses_book_id", Verse.book_id)
Index("ix_words_verse_id", Word.verse_id)
Index("ix_words_form_id", Word.form_id)
