"""Test doubles for the translation platform API."""

import json
from collections.abc import Callable
from typing import Any

import httpx


class RecordingTransport:
    """
    Fake API server for the REST client.

    Every request is recorded; responses come from `routes`, keyed by
    (method, path). Unrouted requests get a 404.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Answer `method path` with a fresh response on every call."""

        def respond(_request: httpx.Request) -> httpx.Response:
            if json_body is None:
                return httpx.Response(status_code, headers=headers)
            return httpx.Response(status_code, json=json_body, headers=headers)

        self.routes[(method, path)] = respond

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": "Not found"})
        return route(request)

    def bodies(self) -> list[Any]:
        """Decoded JSON bodies of all recorded requests (None when empty)."""
        return [json.loads(r.content) if r.content else None for r in self.requests]

    def calls(self) -> list[tuple[str, str]]:
        """(method, path) of all recorded requests, in order."""
        return [(r.method, r.url.path) for r in self.requests]
