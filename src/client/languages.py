"""Language endpoints: settings, imports and members."""

from collections.abc import Iterable
from typing import TYPE_CHECKING
from urllib.parse import quote

from src.db.enums import LanguageRole
from src.schemas.languages import (
    GetLanguageImportResponseBody,
    GetLanguageMembersResponseBody,
    GetLanguageResponseBody,
    GetLanguagesResponseBody,
    PatchLanguageMemberRequestBody,
    PatchLanguageRequestBody,
    PostLanguageMemberRequestBody,
    PostLanguageRequestBody,
    StartLanguageImportRequestBody,
)

if TYPE_CHECKING:
    from src.client.client import ApiClient


def _language_path(code: str, *parts: str) -> str:
    segments = [quote(code, safe=""), *(quote(part, safe="") for part in parts)]
    return "/api/languages/" + "/".join(segments)


class Languages:
    """Maps the /api/languages endpoints onto methods, one request per call."""

    def __init__(self, client: "ApiClient"):
        self.client = client

    # === Languages ===
    async def find_all(self) -> GetLanguagesResponseBody:
        data = await self.client.get("/api/languages")
        return GetLanguagesResponseBody.model_validate(data)

    async def create(self, language: PostLanguageRequestBody) -> None:
        await self.client.post("/api/languages", body=language.to_body())

    async def find_by_code(self, code: str) -> GetLanguageResponseBody:
        data = await self.client.get(_language_path(code))
        return GetLanguageResponseBody.model_validate(data)

    async def update(self, code: str, language: PatchLanguageRequestBody) -> None:
        """Update only the settings that were set on `language`."""
        await self.client.patch(_language_path(code), body=language.to_body(exclude_unset=True))

    # === Import ===
    async def start_import(self, code: str, body: StartLanguageImportRequestBody) -> None:
        await self.client.post(_language_path(code, "import"), body=body.to_body())

    async def import_status(self, code: str) -> GetLanguageImportResponseBody:
        data = await self.client.get(_language_path(code, "import"))
        return GetLanguageImportResponseBody.model_validate(data or {})

    # === Members ===
    async def find_members(self, code: str) -> GetLanguageMembersResponseBody:
        data = await self.client.get(_language_path(code, "members"))
        return GetLanguageMembersResponseBody.model_validate(data)

    async def invite_member(self, code: str, request: PostLanguageMemberRequestBody) -> None:
        await self.client.post(_language_path(code, "members"), body=request.to_body())

    async def update_member(self, code: str, user_id: str, roles: Iterable[LanguageRole]) -> None:
        """Replace the member's roles on the language with `roles`."""
        body = PatchLanguageMemberRequestBody(roles=list(roles))
        await self.client.patch(_language_path(code, "members", user_id), body=body.to_body())

    async def remove_member(self, code: str, user_id: str) -> None:
        await self.client.delete(_language_path(code, "members", user_id))
