"""Home page and logout."""

from html import escape

from fastapi import APIRouter, Depends, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from src.client import ApiClient
from src.core.config import settings
from src.core.i18n import Translator
from src.core.logging import get_logger
from src.schemas.auth import GetSessionResponse
from src.web.dependencies import get_api_client, get_current_session, get_translator
from src.web.templates import render_page

logger = get_logger(__name__)

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="Home page")
async def home(
    session: GetSessionResponse | None = Depends(get_current_session),
    translator: Translator = Depends(get_translator),
) -> Response:
    """Show the signed-in user, or send anonymous visitors to the login form."""
    if session is None or session.user is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    user = session.user
    content = (
        f'<p class="current-user">{escape(user.name or user.email)}</p>\n'
        '<form method="post" action="/logout"><button type="submit">'
        f'{escape(translator.t("users:log_out"))}</button></form>'
    )
    return HTMLResponse(render_page(translator, translator.t("common:tab_titles.home"), content))


@router.post("/logout", summary="Log out")
async def logout(api: ApiClient = Depends(get_api_client)) -> Response:
    """End the API session and clear the browser's session cookie."""
    await api.auth.logout()
    logger.info("User logged out")

    response = RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return response
