"""Middleware for injecting the session store into handlers."""

from collections.abc import Awaitable, Callable
from typing import Any

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from panelbot.sessions.store import SessionStore


class SessionStoreMiddleware(BaseMiddleware):
    """Middleware that adds the 'session_store' key to handler data.

    Usage in handlers:
        async def my_handler(message: Message, session_store: SessionStore):
            session = await session_store.get(message.from_user.id)
    """

    def __init__(self, store: SessionStore):
        self.store = store

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        data["session_store"] = self.store
        return await handler(event, data)
