"""
Lemma and LemmaForm models.

A Lemma is a dictionary root (identified by its Strong's-style ID, e.g.
"H1254" or "G3056"). Each LemmaForm is one inflected variant of it with its
grammatical parsing; many Words share the same LemmaForm.
"""

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.db.base import Base

if TYPE_CHECKING:
    from src.db.models.text import Word


class Lemma(Base):
    """A canonical root word."""

    id: Mapped[str] = mapped_column(String(20), primary_key=True)

    forms: Mapped[list["LemmaForm"]] = relationship(
        "LemmaForm",
        back_populates="lemma",
        order_by="LemmaForm.id",
    )

    def __repr__(self) -> str:
        return f"<Lemma(id={self.id!r})>"

    @property
    def testament(self) -> str:
        """Hebrew lemmas ("H...") belong to the Old Testament, Greek to the New."""
        return "OT" if self.id.startswith("H") else "NT"


class LemmaForm(Base):
    """An inflected form of a lemma, e.g. "H1254-Qal-Perf-3ms"."""

    id: Mapped[str] = mapped_column(String(30), primary_key=True)

    grammar: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Morphological parsing of the form",
    )

    lemma_id: Mapped[str] = mapped_column(ForeignKey("lemmas.id"), nullable=False)

    lemma: Mapped["Lemma"] = relationship("Lemma", back_populates="forms")
    words: Mapped[list["Word"]] = relationship("Word", back_populates="form")

    def __repr__(self) -> str:
        return f"<LemmaForm(id={self.id!r}, grammar={self.grammar!r})>"


# === Indexes ===
Index("ix_lemma_forms_lemma_id", LemmaForm.lemma_id)
