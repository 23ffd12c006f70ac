"""
Database package - SQLAlchemy models, session management, and utilities.

Exports:
- Base classes and mixins for model definition
- Session management for FastAPI and standalone usage
- Database lifecycle utilities
- Controlled vocabulary enums
- All database models

Usage:
    from src.db import Base, get_db_context, transaction
    from src.db import Language, Gloss, LanguageMemberRole
    from src.db import GlossState, LanguageRole
"""

from src.db.base import (
    # Engine and session factory
    AsyncSessionLocal,
    # Base class
    Base,
    # Mixins
    CreatedAtMixin,
    UUIDMixin,
    WordLanguageKeyMixin,
    # Lifecycle utilities
    dispose_engine,
    drop_db,
    engine,
    init_db,
    metadata,
)
from src.db.enums import (
    EmailStatus,
    GlossSource,
    GlossState,
    LanguageRole,
    SystemRole,
    TextDirection,
    validate_language_role,
)
from src.db.models import (
    AuthKey,
    AuthSession,
    AuthUser,
    Book,
    Footnote,
    Gloss,
    GlossHistoryEntry,
    Language,
    LanguageImportJob,
    LanguageMemberRole,
    Lemma,
    LemmaForm,
    MachineGloss,
    TranslatorNote,
    UserSystemRole,
    Verse,
    Word,
)
from src.db.session import get_db_context, transaction

__all__ = [
    # Base classes
    "Base",
    # Mixins
    "UUIDMixin",
    "CreatedAtMixin",
    "WordLanguageKeyMixin",
    # Enums
    "EmailStatus",
    "GlossSource",
    "GlossState",
    "LanguageRole",
    "SystemRole",
    "TextDirection",
    "validate_language_role",
    # Models
    "AuthUser",
    "UserSystemRole",
    "AuthSession",
    "AuthKey",
    "Language",
    "LanguageMemberRole",
    "LanguageImportJob",
    "Book",
    "Verse",
    "Word",
    "Lemma",
    "LemmaForm",
    "Gloss",
    "GlossHistoryEntry",
    "MachineGloss",
    "TranslatorNote",
    "Footnote",
    # Engine and factory
    "engine",
    "AsyncSessionLocal",
    "metadata",
    # Session utilities
    "get_db_context",
    "transaction",
    # Lifecycle
    "init_db",
    "drop_db",
    "dispose_engine",
]
