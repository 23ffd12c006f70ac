"""Unit tests for the language endpoints of the REST client."""

from datetime import datetime, timezone

import pytest

from src.client import ApiClient, ApiClientError
from src.db.enums import LanguageRole, TextDirection
from src.schemas import (
    PatchLanguageRequestBody,
    PostLanguageMemberRequestBody,
    PostLanguageRequestBody,
    StartLanguageImportRequestBody,
)
from tests.fakes import RecordingTransport


class TestLanguages:
    """Tests for language listing, creation and settings."""

    @pytest.mark.asyncio
    async def test_find_all(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test listing languages."""
        transport.add(
            "GET",
            "/api/languages",
            json_body={"data": [{"code": "spa", "name": "Spanish"}, {"code": "hin", "name": "Hindi"}]},
        )

        result = await api.languages.find_all()

        assert [language.code for language in result.data] == ["spa", "hin"]

    @pytest.mark.asyncio
    async def test_create(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test creating a language posts its code and name."""
        transport.add("POST", "/api/languages", status_code=204)

        await api.languages.create(PostLanguageRequestBody(code="spa", name="Spanish"))

        assert transport.calls() == [("POST", "/api/languages")]
        assert transport.bodies() == [{"code": "spa", "name": "Spanish"}]

    def test_create_code_validation(self) -> None:
        """Test language codes must be 2-8 characters."""
        with pytest.raises(ValueError):
            PostLanguageRequestBody(code="s", name="Spanish")
        with pytest.raises(ValueError):
            PostLanguageRequestBody(code="toolongcode", name="Spanish")

    @pytest.mark.asyncio
    async def test_find_by_code(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test camelCase fields are parsed into the language settings."""
        transport.add(
            "GET",
            "/api/languages/heb",
            json_body={
                "data": {
                    "code": "heb",
                    "name": "Hebrew",
                    "font": "SBL Hebrew",
                    "textDirection": "rtl",
                    "bibleTranslationIds": ["wlc"],
                }
            },
        )

        result = await api.languages.find_by_code("heb")

        assert result.data.text_direction == TextDirection.RTL
        assert result.data.bible_translation_ids == ["wlc"]
        assert result.data.font == "SBL Hebrew"

    @pytest.mark.asyncio
    async def test_find_by_code_not_found(self, api: ApiClient) -> None:
        """Test an unknown code raises a 404 ApiClientError."""
        with pytest.raises(ApiClientError) as exc_info:
            await api.languages.find_by_code("xyz")

        assert exc_info.value.is_not_found
        assert exc_info.value.path == "/api/languages/xyz"

    @pytest.mark.asyncio
    async def test_code_is_path_escaped(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test reserved characters in the code cannot alter the path."""
        with pytest.raises(ApiClientError):
            await api.languages.find_by_code("a/b")

        assert transport.requests[0].url.raw_path == b"/api/languages/a%2Fb"

    @pytest.mark.asyncio
    async def test_update_sends_only_set_fields(
        self, api: ApiClient, transport: RecordingTransport
    ) -> None:
        """Test a partial update sends only the fields that were set."""
        transport.add("PATCH", "/api/languages/spa", status_code=204)

        await api.languages.update(
            "spa",
            PatchLanguageRequestBody(font="Noto Serif", text_direction=TextDirection.RTL),
        )

        assert transport.calls() == [("PATCH", "/api/languages/spa")]
        assert transport.bodies() == [{"font": "Noto Serif", "textDirection": "rtl"}]


class TestImport:
    """Tests for starting and polling a gloss import."""

    @pytest.mark.asyncio
    async def test_start_import(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test the source language is sent under the "import" key."""
        transport.add("POST", "/api/languages/spa/import", status_code=204)

        await api.languages.start_import("spa", StartLanguageImportRequestBody(**{"import": "Spanish"}))

        assert transport.bodies() == [{"import": "Spanish"}]

    def test_start_import_by_field_name(self) -> None:
        """Test the body can be built with the Python field name."""
        body = StartLanguageImportRequestBody(import_language="Spanish")
        assert body.to_body() == {"import": "Spanish"}

    @pytest.mark.asyncio
    async def test_import_status_running(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test a running import has a start date but no end date."""
        transport.add(
            "GET",
            "/api/languages/spa/import",
            json_body={"startDate": "2026-10-18T12:00:00Z", "endDate": None, "succeeded": None},
        )

        status = await api.languages.import_status("spa")

        assert status.start_date == datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
        assert not status.is_complete
        assert status.succeeded is None

    @pytest.mark.asyncio
    async def test_import_status_finished(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test a finished import reports its outcome."""
        transport.add(
            "GET",
            "/api/languages/spa/import",
            json_body={
                "startDate": "2026-10-18T12:00:00Z",
                "endDate": "2026-10-18T12:05:00Z",
                "succeeded": True,
            },
        )

        status = await api.languages.import_status("spa")

        assert status.is_complete
        assert status.succeeded is True

    @pytest.mark.asyncio
    async def test_import_status_empty(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test an empty response means no import was ever started."""
        transport.add("GET", "/api/languages/spa/import", status_code=204)

        status = await api.languages.import_status("spa")

        assert status.start_date is None
        assert not status.is_complete


class TestMembers:
    """Tests for language membership."""

    @pytest.mark.asyncio
    async def test_find_members(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test members are parsed with their roles."""
        transport.add(
            "GET",
            "/api/languages/spa/members",
            json_body={
                "data": [
                    {
                        "userId": "u1",
                        "name": "Ana",
                        "email": "ana@example.com",
                        "roles": ["ADMIN", "TRANSLATOR"],
                    }
                ]
            },
        )

        result = await api.languages.find_members("spa")

        member = result.data[0]
        assert member.user_id == "u1"
        assert member.roles == [LanguageRole.ADMIN, LanguageRole.TRANSLATOR]

    @pytest.mark.asyncio
    async def test_invite_member_body(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test inviting sends exactly the email and roles."""
        transport.add("POST", "/api/languages/spa/members", status_code=204)

        await api.languages.invite_member(
            "spa",
            PostLanguageMemberRequestBody(email="new@example.com", roles=[LanguageRole.TRANSLATOR]),
        )

        assert transport.calls() == [("POST", "/api/languages/spa/members")]
        assert transport.bodies() == [{"email": "new@example.com", "roles": ["TRANSLATOR"]}]

    @pytest.mark.asyncio
    async def test_update_member(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test updating a member replaces their roles."""
        transport.add("PATCH", "/api/languages/spa/members/u1", status_code=204)

        await api.languages.update_member("spa", "u1", (LanguageRole.VIEWER,))

        assert transport.calls() == [("PATCH", "/api/languages/spa/members/u1")]
        assert transport.bodies() == [{"roles": ["VIEWER"]}]

    @pytest.mark.asyncio
    async def test_remove_member(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test removing a member issues a DELETE without a body."""
        transport.add("DELETE", "/api/languages/spa/members/u1", status_code=204)

        await api.languages.remove_member("spa", "u1")

        assert transport.calls() == [("DELETE", "/api/languages/spa/members/u1")]
        assert transport.bodies() == [None]

    @pytest.mark.asyncio
    async def test_remove_member_forbidden(self, api: ApiClient, transport: RecordingTransport) -> None:
        """Test a non-admin caller gets a 403 ApiClientError."""
        transport.add("DELETE", "/api/languages/spa/members/u1", status_code=403)

        with pytest.raises(ApiClientError) as exc_info:
            await api.languages.remove_member("spa", "u1")

        assert exc_info.value.is_forbidden
