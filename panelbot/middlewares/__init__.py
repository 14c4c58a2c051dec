"""Middlewares for the panel bot."""

from panelbot.middlewares.sessions import SessionStoreMiddleware

__all__ = [
    "SessionStoreMiddleware",
]
