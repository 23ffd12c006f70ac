#!/usr/bin/env python3
"""
Smoke test the translation platform REST API through the typed client.

This script logs in and exercises the read-only endpoints:
1. GET  /api/auth/session (before and after login)
2. POST /api/auth/login
3. GET  /api/languages
4. GET  /api/languages/:code, /members and /import for one language
5. POST /api/auth/logout

Usage:
    # Against the configured API (API_BASE_URL, default http://localhost:4300)
    python scripts/smoke_api.py --email admin@example.com --password secret

    # Against another server, checking a specific language
    python scripts/smoke_api.py --base-url https://api.example.org \\
        --email admin@example.com --password secret --language spa

This is NOT a replacement for the pytest suite, just a quick check that a
running API speaks the same wire format as the client.
"""

import argparse
import asyncio
import sys
from collections.abc import Awaitable
from pathlib import Path
from typing import Any

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import httpx  # noqa: E402

from src.client import ApiClient, ApiClientError  # noqa: E402
from src.core.config import settings  # noqa: E402
from src.core.logging import get_logger, setup_logging  # noqa: E402

logger = get_logger(__name__)


async def check(results: list[tuple[str, str]], name: str, call: Awaitable[Any]) -> Any:
    """Await one API call and record whether it passed."""
    try:
        value = await call
    except ApiClientError as e:
        results.append((name, f"❌ FAIL: {e}"))
        return None
    results.append((name, "✅ PASS"))
    return value


async def run_smoke_test(
    base_url: str,
    email: str,
    password: str,
    language: str | None = None,
) -> bool:
    """Run the smoke test. Returns True when every call succeeded."""
    results: list[tuple[str, str]] = []

    async with ApiClient(base_url=base_url) as api:
        session = await check(results, "GET /api/auth/session (anonymous)", api.auth.session())
        if session is not None and session.is_authenticated:
            logger.warning("Session already authenticated before login")

        await check(results, "POST /api/auth/login", api.auth.login(email, password))
        session = await check(results, "GET /api/auth/session", api.auth.session())
        if session is not None and session.user is not None:
            logger.info("Logged in", user_id=session.user.id, email=session.user.email)

        languages = await check(results, "GET /api/languages", api.languages.find_all())
        if language is None and languages is not None and languages.data:
            language = languages.data[0].code

        if language is None:
            results.append(("GET /api/languages/:code", "⏭️ SKIP (no languages)"))
        else:
            await check(results, f"GET /api/languages/{language}", api.languages.find_by_code(language))
            members = await check(
                results,
                f"GET /api/languages/{language}/members",
                api.languages.find_members(language),
            )
            if members is not None:
                logger.info("Language members", code=language, count=len(members.data))
            status = await check(
                results,
                f"GET /api/languages/{language}/import",
                api.languages.import_status(language),
            )
            if status is not None:
                logger.info(
                    "Import status",
                    code=language,
                    complete=status.is_complete,
                    succeeded=status.succeeded,
                )

        await check(results, "POST /api/auth/logout", api.auth.logout())

    print()
    print("=" * 60)
    print("RESULTS")
    print("=" * 60)

    failed = 0
    for endpoint, status in results:
        print(f"  {status:50} {endpoint}")
        if "❌" in status:
            failed += 1

    print()
    print("-" * 60)
    print(f"  Total: {len(results)} | Failed: {failed}")
    print("=" * 60)

    return failed == 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Smoke test the translation platform REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--base-url",
        type=str,
        default=settings.api_base_url,
        help=f"API origin (default: {settings.api_base_url})",
    )

    parser.add_argument(
        "--email", "-e",
        type=str,
        required=True,
        help="Login email",
    )

    parser.add_argument(
        "--password", "-p",
        type=str,
        required=True,
        help="Login password",
    )

    parser.add_argument(
        "--language", "-l",
        type=str,
        default=None,
        help="Language code to inspect (default: first listed language)",
    )

    args = parser.parse_args()
    setup_logging()

    try:
        success = asyncio.run(
            run_smoke_test(
                base_url=args.base_url,
                email=args.email,
                password=args.password,
                language=args.language,
            )
        )
    except httpx.ConnectError:
        print("❌ ERROR: Cannot connect to API server at", args.base_url)
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
