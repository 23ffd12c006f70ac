"""
Controlled vocabulary enums for the translation platform.

This module defines the allowed values for:
- Text direction of a language's script
- Gloss approval state and the origin of gloss history entries
- Role grants (platform-wide and per language)
- Email deliverability status of a user

These enums are stored as native PostgreSQL ENUM types, so any value outside
the vocabulary is rejected at the database level.
"""

from enum import Enum


class TextDirection(str, Enum):
    """Writing direction of a language's script."""

    LTR = "ltr"
    RTL = "rtl"


class GlossState(str, Enum):
    """
    Approval state of a gloss.

    A gloss starts UNAPPROVED (typically after a machine suggestion or a
    bulk import) and becomes APPROVED once a translator confirms it.
    """

    APPROVED = "APPROVED"
    UNAPPROVED = "UNAPPROVED"


class GlossSource(str, Enum):
    """Origin of a gloss history entry."""

    USER = "USER"
    IMPORT = "IMPORT"


class EmailStatus(str, Enum):
    """Deliverability status of a user's email address."""

    UNVERIFIED = "UNVERIFIED"
    VERIFIED = "VERIFIED"
    BOUNCED = "BOUNCED"
    COMPLAINED = "COMPLAINED"

    @property
    def can_receive_mail(self) -> bool:
        """Bounced and complained addresses must not be emailed again."""
        return self in {EmailStatus.UNVERIFIED, EmailStatus.VERIFIED}


class LanguageRole(str, Enum):
    """
    Role a user holds on a single language.

    Grants are additive: a user may hold several roles for the same language
    at once (e.g. ADMIN and TRANSLATOR).

    - ADMIN: Manage the language's settings and members
    - TRANSLATOR: Edit glosses, notes and footnotes
    - VIEWER: Read-only access
    """

    ADMIN = "ADMIN"
    TRANSLATOR = "TRANSLATOR"
    VIEWER = "VIEWER"

    @classmethod
    def from_string(cls, value: str) -> "LanguageRole | None":
        """
        Convert a string to LanguageRole, normalizing case and whitespace.

        Returns None if no match found.

        Examples:
            LanguageRole.from_string("admin")        -> LanguageRole.ADMIN
            LanguageRole.from_string(" Translator ") -> LanguageRole.TRANSLATOR
            LanguageRole.from_string("owner")        -> None
        """
        if not value:
            return None
        normalized = value.strip().upper()
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @classmethod
    def values(cls) -> list[str]:
        """Return list of all valid language role values."""
        return [member.value for member in cls]


class SystemRole(str, Enum):
    """Platform-wide role, independent of any language."""

    ADMIN = "ADMIN"


# =============================================================================
# VALIDATION HELPERS
# =============================================================================

def validate_language_role(value: str) -> LanguageRole:
    """
    Validate and convert a string to LanguageRole.

    Raises ValueError if the value is not a valid language role.
    """
    result = LanguageRole.from_string(value)
    if result is None:
        valid_roles = ", ".join(LanguageRole.values())
        raise ValueError(f"Invalid language role: '{value}'. Must be one of: {valid_roles}")
    return result
