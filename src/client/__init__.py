"""
REST client for the translation platform API.

This package contains:
- ApiClient: httpx-based transport with `auth` and `languages` resources
- ApiClientError: raised for non-2xx responses, carries the HTTP status
- Auth, Languages: one method per endpoint
"""

from src.client.auth import Auth
from src.client.client import ApiClient, ApiClientError
from src.client.languages import Languages

__all__ = [
    "ApiClient",
    "ApiClientError",
    "Auth",
    "Languages",
]
