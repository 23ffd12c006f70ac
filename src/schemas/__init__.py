"""Pydantic schemas for REST request/response bodies."""

from src.schemas.auth import (
    GetInviteResponseBody,
    GetSessionResponse,
    PostInviteRequestBody,
    PostLoginRequest,
    SessionUser,
)
from src.schemas.common import ApiModel, HealthResponse
from src.schemas.languages import (
    GetLanguageImportResponseBody,
    GetLanguageMembersResponseBody,
    GetLanguageResponseBody,
    GetLanguagesResponseBody,
    LanguageMember,
    LanguageResponse,
    LanguageSummary,
    PatchLanguageMemberRequestBody,
    PatchLanguageRequestBody,
    PostLanguageMemberRequestBody,
    PostLanguageRequestBody,
    StartLanguageImportRequestBody,
)

__all__ = [
    # Common
    "ApiModel",
    "HealthResponse",
    # Auth
    "GetInviteResponseBody",
    "GetSessionResponse",
    "PostInviteRequestBody",
    "PostLoginRequest",
    "SessionUser",
    # Languages
    "GetLanguageImportResponseBody",
    "GetLanguageMembersResponseBody",
    "GetLanguageResponseBody",
    "GetLanguagesResponseBody",
    "LanguageMember",
    "LanguageResponse",
    "LanguageSummary",
    "PatchLanguageMemberRequestBody",
    "PatchLanguageRequestBody",
    "PostLanguageMemberRequestBody",
    "PostLanguageRequestBody",
    "StartLanguageImportRequestBody",
]
