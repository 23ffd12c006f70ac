"""Web views for the translation platform."""

from src.web.home import router as home_router
from src.web.login import router as login_router

__all__ = [
    "home_router",
    "login_router",
]
