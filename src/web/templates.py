"""
HTML rendering for the web views.

Pages are small and static, so they are built from string templates. Every
interpolated value passes through `html.escape`.
"""

from html import escape

from src.core.i18n import Translator
from src.web.flash import Flash

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="{lang}">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
</head>
<body>
{flash}
<main>
{content}
</main>
</body>
</html>
"""


def render_flash(flash: Flash | None) -> str:
    if not flash:
        return ""
    items = "\n".join(
        f'<li class="flash flash-{message.level.value}" role="alert">{escape(message.text)}</li>'
        for message in flash.messages
    )
    return f'<ul class="flash-messages">\n{items}\n</ul>'


def render_page(translator: Translator, title: str, content: str, flash: Flash | None = None) -> str:
    """Wrap content in the page layout. `content` must already be escaped."""
    app_name = translator.t("common:app_name")
    return PAGE_TEMPLATE.format(
        lang=escape(translator.locale),
        title=escape(f"{title} | {app_name}"),
        flash=render_flash(flash),
        content=content,
    )


def render_input_error(field_id: str, message: str | None) -> str:
    text = escape(message) if message else ""
    return f'<p id="{field_id}-error" class="input-error" aria-live="polite">{text}</p>'


def render_login_form(
    translator: Translator,
    email: str = "",
    errors: dict[str, str] | None = None,
) -> str:
    """
    Render the login form.

    Args:
        translator: Translator for labels
        email: Value to prefill (the password is never echoed back)
        errors: Field name -> localized error message
    """
    errors = errors or {}
    t = translator.t
    return f"""<section class="modal-view">
<h1>{escape(t("users:log_in"))}</h1>
<form method="post" action="/login" novalidate>
  <div class="field">
    <label for="email">{escape(t("users:email").upper())}</label>
    <input id="email" name="email" type="email" value="{escape(email)}" autocomplete="username" aria-describedby="email-error" required>
    {render_input_error("email", errors.get("email"))}
  </div>
  <div class="field">
    <label for="password">{escape(t("users:password").upper())}</label>
    <input id="password" name="password" type="password" autocomplete="current-password" aria-describedby="password-error" required>
    {render_input_error("password", errors.get("password"))}
  </div>
  <button type="submit">{escape(t("users:log_in"))}</button>
</form>
</section>"""
