"""
SQLAlchemy Base Configuration and Mixins.

This module provides:
- Async engine and session factory configuration
- Base declarative class for all models
- Reusable mixins (UUID7 primary key, timestamps)

All models in this project inherit from `Base`. Tables with a surrogate key
use `UUIDMixin`; the fixed biblical text (books, verses, words, lemmas) uses
its natural string or integer identifiers instead.
"""

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, ForeignKey, MetaData, String, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncAttrs, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid6 import uuid7

from src.core.config import settings

# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

# Naming convention for database constraints
# Alembic relies on these names being identical across environments
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",                    # Index
    "uq": "uq_%(table_name)s_%(column_0_name)s",      # Unique constraint
    "ck": "ck_%(table_name)s_%(constraint_name)s",    # Check constraint
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",  # Foreign key
    "pk": "pk_%(table_name)s",                        # Primary key
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)

# Async database engine
# - pool_pre_ping: Validates connections before use (handles stale connections)
# - echo: Logs SQL statements when in development mode
engine = create_async_engine(
    settings.db_url,
    echo=settings.is_development and settings.log_level == "DEBUG",
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

# Async session factory
# - expire_on_commit=False: Objects remain accessible after commit
# - autoflush=False: Writes happen only on explicit flush/commit
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    autoflush=False,
)


# =============================================================================
# BASE CLASS
# =============================================================================

def pluralize_table_name(class_name: str) -> str:
    """
    Convert a CamelCase class name into a plural snake_case table name.

    - Language -> languages
    - GlossHistoryEntry -> gloss_history_entries
    - Gloss -> glosses
    - AuthKey -> auth_keys
    """
    snake_case = "".join(
        f"_{char.lower()}" if char.isupper() and i > 0 else char.lower()
        for i, char in enumerate(class_name)
    )
    if snake_case.endswith("y") and snake_case[-2:-1] not in ("a", "e", "i", "o", "u"):
        return snake_case[:-1] + "ies"
    elif snake_case.endswith("s"):
        return snake_case + "es"
    else:
        return snake_case + "s"


class Base(AsyncAttrs, DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Features:
    - AsyncAttrs: Enables `await` on lazy-loaded relationships
    - DeclarativeBase: Modern SQLAlchemy 2.0 declarative base
    - Custom metadata with naming conventions
    - Automatic __tablename__ generation from class name

    Example:
        class Language(UUIDMixin, Base):
            # __tablename__ automatically set to "languages"
            code: Mapped[str] = mapped_column(String(8))
    """

    metadata = metadata

    __name__: str

    @declared_attr.directive
    def __tablename__(cls) -> str:
        return pluralize_table_name(cls.__name__)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to a JSON-friendly dictionary.

        Handles special types:
        - UUID -> string
        - datetime -> ISO format string
        - Enum -> value
        """
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, uuid.UUID):
                value = str(value)
            elif isinstance(value, datetime):
                value = value.isoformat()
            elif hasattr(value, "value"):   # Enum
                value = value.value
            result[column.key] = value
        return result


# =============================================================================
# MIXINS
# =============================================================================

class UUIDMixin:
    """
    Mixin that provides a UUID7 primary key.

    The 'id' column will be:
    - Primary key
    - Generated client-side on insert (time-sortable UUID7)
    - PostgreSQL native UUID type
    """

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid7,
        sort_order=-100,  # Ensure 'id' appears first in the table definition
    )


class CreatedAtMixin:
    """
    Mixin that provides only a created_at timestamp.

    Set once on insert by the database server.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        sort_order=100,
    )


class WordLanguageKeyMixin:
    """
    Mixin for per-word, per-language content keyed by (word_id, language_id).

    The composite primary key guarantees at most one row per word and
    language; a second insert with the same pair fails with IntegrityError.
    Rows are removed with their language.
    """

    word_id: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("words.id"),
        primary_key=True,
        sort_order=-100,
    )

    language_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("languages.id", ondelete="CASCADE"),
        primary_key=True,
        sort_order=-99,
    )


# =============================================================================
# DATABASE LIFECYCLE UTILITIES
# =============================================================================

async def init_db() -> None:
    """
    Initialize the database by creating all tables.

    Note: In production, use Alembic migrations instead.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_db() -> None:
    """
    Drop all tables in the database.

    Warning: This is destructive! Only use in testing.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def dispose_engine() -> None:
    """Dispose of the engine and close all pooled connections."""
    await engine.dispose()
