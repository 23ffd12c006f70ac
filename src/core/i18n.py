"""
Message catalogs for localized UI copy.

Catalogs live in ``src/locales/<locale>/<namespace>.json``. Keys are addressed
as ``"namespace:dotted.path"``, e.g. ``"users:errors.invalid_auth"``. When the
namespace prefix is omitted the translator's default namespace is used.

Lookup order:
1. The requested locale
2. The configured default locale
3. The key itself (so missing copy is visible rather than blank)
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from src.core.config import settings
from src.core.logging import get_logger

logger = get_logger(__name__)

LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"


@lru_cache
def load_catalog(locale: str, namespace: str) -> dict[str, Any]:
    """Load and cache one namespace catalog for a locale.

    Returns an empty dict when the catalog file does not exist.
    """
    path = LOCALES_DIR / locale / f"{namespace}.json"
    if not path.is_file():
        logger.debug("Catalog not found", locale=locale, namespace=namespace)
        return {}
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _lookup(catalog: dict[str, Any], dotted_key: str) -> str | None:
    node: Any = catalog
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    return node if isinstance(node, str) else None


class Translator:
    """Resolves message keys for a single locale."""

    def __init__(
        self,
        locale: str | None = None,
        default_namespace: str = "common",
        fallback_locale: str | None = None,
    ):
        self.locale = locale or settings.default_locale
        self.default_namespace = default_namespace
        self.fallback_locale = fallback_locale or settings.default_locale

    def t(self, key: str, **params: Any) -> str:
        """
        Translate a key, interpolating ``{name}`` placeholders from params.

        Examples:
            t("users:errors.invalid_auth")  -> "Invalid email or password."
            t("tab_titles.login")           -> "Log In" (common namespace)
            t("users:unknown")              -> "users:unknown"
        """
        namespace, _, dotted_key = key.rpartition(":")
        namespace = namespace or self.default_namespace

        message = _lookup(load_catalog(self.locale, namespace), dotted_key)
        if message is None and self.fallback_locale != self.locale:
            message = _lookup(load_catalog(self.fallback_locale, namespace), dotted_key)
        if message is None:
            logger.warning("Missing translation", locale=self.locale, key=key)
            return key

        return message.format(**params) if params else message


def negotiate_locale(accept_language: str | None, supported: list[str] | None = None) -> str:
    """
    Pick the best supported locale from an Accept-Language header.

    Quality values are honored; region subtags match their base language
    ("es-MX" matches "es"). Falls back to the default locale.
    """
    supported = supported or settings.supported_locales
    if not accept_language:
        return settings.default_locale

    candidates: list[tuple[float, str]] = []
    for part in accept_language.split(","):
        tag, _, params = part.strip().partition(";")
        if not tag:
            continue
        quality = 1.0
        if params.strip().startswith("q="):
            try:
                quality = float(params.strip()[2:])
            except ValueError:
                quality = 0.0
        if quality > 0:
            candidates.append((quality, tag.strip().lower()))

    # Stable sort keeps header order for equal quality
    for _, tag in sorted(candidates, key=lambda c: -c[0]):
        if tag in supported:
            return tag
        base = tag.split("-")[0]
        if base in supported:
            return base

    return settings.default_locale
