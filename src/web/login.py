"""
Login view.

GET /login
    → Renders the login form

POST /login
    → Validates the form (email and password are required)
    → Calls POST /api/auth/login through the REST client
    → On success: refreshes the session, forwards the API's session cookie
      and redirects to the home page
    → On 401: shows the localized "invalid credentials" message
    → On any other error: shows the error text
"""

from datetime import datetime, timezone

import httpx
from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from pydantic import BaseModel, ValidationError, field_validator

from src.client import ApiClient, ApiClientError
from src.core.config import settings
from src.core.i18n import Translator
from src.core.logging import get_logger
from src.web.dependencies import get_api_client, get_translator
from src.web.flash import Flash
from src.web.templates import render_login_form, render_page

logger = get_logger(__name__)

router = APIRouter()

# Field -> message key shown when the field is missing
REQUIRED_MESSAGES = {
    "email": "users:errors.email_required",
    "password": "users:errors.password_required",
}


class LoginForm(BaseModel):
    """Submitted login form. Both fields are required."""

    email: str
    password: str

    @field_validator("email")
    @classmethod
    def email_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("required")
        return value

    @field_validator("password")
    @classmethod
    def password_required(cls, value: str) -> str:
        if not value:
            raise ValueError("required")
        return value


def form_errors(error: ValidationError, translator: Translator) -> dict[str, str]:
    """Map pydantic validation errors to localized per-field messages."""
    errors: dict[str, str] = {}
    for detail in error.errors():
        field = str(detail["loc"][0]) if detail["loc"] else ""
        if field in REQUIRED_MESSAGES and field not in errors:
            errors[field] = translator.t(REQUIRED_MESSAGES[field])
    return errors


def render_login(
    translator: Translator,
    email: str = "",
    errors: dict[str, str] | None = None,
    flash: Flash | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    content = render_login_form(translator, email=email, errors=errors)
    html = render_page(translator, translator.t("common:tab_titles.login"), content, flash)
    return HTMLResponse(html, status_code=status_code)


def cookie_expiry(expires: int | None) -> datetime | None:
    """Absolute expiry of an API cookie, or None for a browser-session cookie."""
    if expires is None:
        return None
    return datetime.fromtimestamp(expires, tz=timezone.utc)


def forward_cookies(api: ApiClient, response: Response) -> None:
    """Copy cookies set by the API (e.g. a new session) onto the browser response."""
    for cookie in api.set_cookies.jar:
        response.set_cookie(
            key=cookie.name,
            value=cookie.value or "",
            path=cookie.path or "/",
            expires=cookie_expiry(cookie.expires),
            httponly=True,
            samesite="lax",
            secure=settings.is_production,
        )


async def refresh_auth(api: ApiClient) -> None:
    """Reload the session after login so the new user is known.

    The login has already succeeded, so a failure here is only logged.
    """
    try:
        session = await api.auth.session()
    except (ApiClientError, httpx.HTTPError) as error:
        logger.warning("Session refresh after login failed", error=str(error))
        return
    if session.user:
        logger.info("User logged in", user_id=session.user.id)


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/login", response_class=HTMLResponse, summary="Login form")
async def login_form(translator: Translator = Depends(get_translator)) -> HTMLResponse:
    return render_login(translator)


@router.post("/login", response_class=HTMLResponse, summary="Submit login form")
async def submit_login(
    email: str = Form(default=""),
    password: str = Form(default=""),
    api: ApiClient = Depends(get_api_client),
    translator: Translator = Depends(get_translator),
) -> Response:
    """Log in through the API and redirect home, or re-render with errors."""
    try:
        form = LoginForm(email=email, password=password)
    except ValidationError as error:
        return render_login(
            translator,
            email=email,
            errors=form_errors(error, translator),
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    flash = Flash()
    try:
        await api.auth.login(form.email, form.password)
    except ApiClientError as error:
        if error.is_unauthorized:
            logger.info("Login rejected", status=error.status)
            flash.error(translator.t("users:errors.invalid_auth"))
            return render_login(
                translator,
                email=form.email,
                flash=flash,
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        logger.warning("Login failed", status=error.status, error=str(error))
        flash.error(str(error))
        return render_login(
            translator,
            email=form.email,
            flash=flash,
            status_code=status.HTTP_502_BAD_GATEWAY,
        )
    except Exception as error:
        logger.warning("Login failed", error=str(error), exc_info=True)
        flash.error(str(error))
        return render_login(
            translator,
            email=form.email,
            flash=flash,
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    await refresh_auth(api)

    response = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    forward_cookies(api, response)
    return response
