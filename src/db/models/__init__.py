"""
Database models for the translation platform.

This package contains SQLAlchemy models for:
- AuthUser, UserSystemRole: Identity and platform-wide roles
- AuthSession, AuthKey: Login sessions and credentials
- Language, LanguageMemberRole, LanguageImportJob: Target languages, access, imports
- Book, Verse, Word: The fixed biblical text
- Lemma, LemmaForm: Dictionary roots and their inflected forms
- Gloss, GlossHistoryEntry, MachineGloss: Word translations and their history
- TranslatorNote, Footnote: Authored notes per word and language

Usage:
    from src.db.models import Gloss, Language, Word
"""

from src.db.models.auth import AuthKey, AuthSession
from src.db.models.gloss import Gloss, GlossHistoryEntry, MachineGloss
from src.db.models.language import Language
from src.db.models.language_import_job import LanguageImportJob
from src.db.models.language_member_role import LanguageMemberRole
from src.db.models.lemma import Lemma, LemmaForm
from src.db.models.note import Footnote, TranslatorNote
from src.db.models.text import Book, Verse, Word
from src.db.models.user import AuthUser, UserSystemRole

__all__ = [
    # Identity
    "AuthUser",
    "UserSystemRole",
    "AuthSession",
    "AuthKey",
    # Languages
    "Language",
    "LanguageMemberRole",
    "LanguageImportJob",
    # Reference text
    "Book",
    "Verse",
    "Word",
    "Lemma",
    "LemmaForm",
    # Translation content
    "Gloss",
    "GlossHistoryEntry",
    "MachineGloss",
    "TranslatorNote",
    "Footnote",
]
