"""Pydantic schemas for the language endpoints."""

from datetime import datetime

from pydantic import Field

from src.db.enums import LanguageRole, TextDirection
from src.schemas.common import ApiModel

# =============================================================================
# Languages
# =============================================================================


class LanguageSummary(ApiModel):
    """Language as listed by GET /api/languages."""

    code: str
    name: str


class LanguageResponse(ApiModel):
    """Full language settings as returned by GET /api/languages/:code."""

    code: str
    name: str
    font: str = "Noto Sans"
    text_direction: TextDirection = TextDirection.LTR
    bible_translation_ids: list[str] = Field(default_factory=list)


class GetLanguagesResponseBody(ApiModel):
    data: list[LanguageSummary]


class GetLanguageResponseBody(ApiModel):
    data: LanguageResponse


class PostLanguageRequestBody(ApiModel):
    """Body of POST /api/languages."""

    code: str = Field(min_length=2, max_length=8, description="Short language code")
    name: str = Field(min_length=1, max_length=100, description="Display name")


class PatchLanguageRequestBody(ApiModel):
    """
    Body of PATCH /api/languages/:code.

    Only the fields that were set are sent, so a partial update leaves the
    other settings untouched.
    """

    name: str | None = Field(default=None, min_length=1, max_length=100)
    font: str | None = None
    text_direction: TextDirection | None = None
    bible_translation_ids: list[str] | None = None


# =============================================================================
# Import
# =============================================================================


class StartLanguageImportRequestBody(ApiModel):
    """Body of POST /api/languages/:code/import.

    `import_language` names the source gloss set to import; it is sent as
    `"import"`, which is a reserved word in Python.
    """

    import_language: str = Field(alias="import", min_length=1)


class GetLanguageImportResponseBody(ApiModel):
    """Response of GET /api/languages/:code/import."""

    start_date: datetime | None = None
    end_date: datetime | None = None
    succeeded: bool | None = None

    @property
    def is_complete(self) -> bool:
        return self.end_date is not None


# =============================================================================
# Members
# =============================================================================


class LanguageMember(ApiModel):
    user_id: str
    name: str | None = None
    email: str
    roles: list[LanguageRole] = Field(default_factory=list)


class GetLanguageMembersResponseBody(ApiModel):
    data: list[LanguageMember]


class PostLanguageMemberRequestBody(ApiModel):
    """Body of POST /api/languages/:code/members: invite a user by email."""

    email: str = Field(min_length=1)
    roles: list[LanguageRole]


class PatchLanguageMemberRequestBody(ApiModel):
    """Body of PATCH /api/languages/:code/members/:userId: replace roles."""

    roles: list[LanguageRole]
