"""
FastAPI dependencies shared by the web views.

Usage:
    @router.get("/")
    async def home(
        api: ApiClient = Depends(get_api_client),
        translator: Translator = Depends(get_translator),
    ): ...
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request

from src.client import ApiClient, ApiClientError
from src.core.config import settings
from src.core.i18n import Translator, negotiate_locale
from src.schemas.auth import GetSessionResponse


def session_cookies(request: Request) -> dict[str, str]:
    """The browser's session cookie, if any, to forward to the API."""
    session_id = request.cookies.get(settings.session_cookie_name)
    return {settings.session_cookie_name: session_id} if session_id else {}


async def get_api_client(request: Request) -> AsyncGenerator[ApiClient, None]:
    """
    Provide a request-scoped API client carrying the browser's session cookie.

    The client is closed when the request completes.
    """
    api = ApiClient(cookies=session_cookies(request))
    try:
        yield api
    finally:
        await api.aclose()


def get_translator(request: Request) -> Translator:
    """Translator for the locale negotiated from the Accept-Language header."""
    locale = negotiate_locale(request.headers.get("accept-language"))
    return Translator(locale)


async def get_current_session(
    api: ApiClient = Depends(get_api_client),
) -> GetSessionResponse | None:
    """
    Fetch the current session from the API.

    Returns None when the API rejects the session (401); other failures
    propagate.
    """
    try:
        return await api.auth.session()
    except ApiClientError as error:
        if error.is_unauthorized:
            return None
        raise
