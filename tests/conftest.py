"""Test configuration and reusable fixtures for the panel bot test suite.

Provides mock aiogram objects (users, chats, messages, callbacks, bots) and an
in-memory session store so tests never touch Telegram or Redis.
"""

from __future__ import annotations

import os
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from aiocache import Cache
from aiogram.types import CallbackQuery, Chat, Message, User

# Set up test environment variables before any imports
os.environ.setdefault("LOGFIRE_IGNORE_NO_CONFIG", "1")
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("TELEGRAM_BOT_TOKEN", "123456:TEST_TOKEN_FOR_TESTING")

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from panelbot.sessions.store import SessionStore


# =============================================================================
# SESSION STORE FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def session_store() -> AsyncGenerator[SessionStore]:
    """Provide a SessionStore backed by an isolated in-memory cache."""
    from panelbot.sessions.store import SessionStore

    cache = Cache(Cache.MEMORY, namespace=f"test-{uuid.uuid4().hex}")
    store = SessionStore(cache)
    yield store
    await cache.clear()


@pytest.fixture
def make_session():
    """Factory for BotSession objects with an optional remembered panel.

    Usage:
        session = make_session(chat_id=123, message_thread_id=77)
        session = make_session(panel=False)  # idle, never shown a panel
    """
    from panelbot.sessions.models import BotSession, PanelRef, PanelState

    def _make(
        user_id: int = 1,
        panel: bool = True,
        chat_id: int = 123,
        message_id: int = 50,
        panel_id: str = "main",
        message_thread_id: int | None = None,
    ) -> BotSession:
        if not panel:
            return BotSession(user_id=user_id)
        return BotSession(
            user_id=user_id,
            state=PanelState(panel_id=panel_id),
            panel=PanelRef(
                chat_id=chat_id,
                message_id=message_id,
                panel_id=panel_id,
                message_thread_id=message_thread_id,
            ),
        )

    return _make


# =============================================================================
# TELEGRAM OBJECT FACTORIES (Mocks for aiogram types)
# =============================================================================


@pytest.fixture
def make_user():
    """Factory fixture for creating mock Telegram User objects."""

    def _make_user(
        id: int = 12345,
        is_bot: bool = False,
        first_name: str = "Test",
        last_name: str | None = "User",
        username: str | None = "testuser",
        **kwargs,
    ) -> User:
        user = MagicMock(spec=User)
        user.id = id
        user.is_bot = is_bot
        user.first_name = first_name
        user.last_name = last_name
        user.username = username
        user.full_name = f"{first_name} {last_name or ''}".strip()

        for key, value in kwargs.items():
            setattr(user, key, value)

        return user

    return _make_user


@pytest.fixture
def make_chat():
    """Factory fixture for creating mock Telegram Chat objects."""

    def _make_chat(
        id: int = -1001234567890,
        type: str = "supergroup",
        title: str | None = "Test Chat",
        is_forum: bool | None = False,
        **kwargs,
    ) -> Chat:
        chat = MagicMock(spec=Chat)
        chat.id = id
        chat.type = type
        chat.title = title
        chat.is_forum = is_forum

        for key, value in kwargs.items():
            setattr(chat, key, value)

        return chat

    return _make_chat


@pytest.fixture
def make_bot(make_user):
    """Factory fixture for creating mock Bot objects.

    `send_message` returns a message with id `sent_message_id`.
    """

    def _make_bot(
        id: int = 123456,
        username: str = "PanelTestBot",
        sent_message_id: int = 900,
        **kwargs,
    ) -> MagicMock:
        bot = MagicMock()
        bot.id = id
        bot.me = AsyncMock(
            return_value=make_user(id=id, is_bot=True, username=username)
        )

        sent = MagicMock(spec=Message)
        sent.message_id = sent_message_id
        bot.send_message = AsyncMock(return_value=sent)
        bot.edit_message_text = AsyncMock()
        bot.answer_callback_query = AsyncMock()

        for key, value in kwargs.items():
            setattr(bot, key, value)

        return bot

    return _make_bot


@pytest.fixture
def make_message(make_user, make_chat, make_bot):
    """Factory fixture for creating mock Telegram Message objects."""

    def _make_message(
        message_id: int = 1,
        text: str | None = None,
        user_id: int = 12345,
        chat_id: int = -1001234567890,
        chat_type: str = "supergroup",
        message_thread_id: int | None = None,
        is_topic_message: bool = False,
        **kwargs,
    ) -> Message:
        message = MagicMock(spec=Message)
        message.message_id = message_id
        message.text = text
        message.from_user = make_user(id=user_id)
        message.chat = make_chat(id=chat_id, type=chat_type)
        message.message_thread_id = message_thread_id
        message.is_topic_message = is_topic_message
        message.content_type = "text"
        message.date = datetime.now(UTC)

        message.reply = AsyncMock(return_value=message)
        message.answer = AsyncMock(return_value=message)
        message.edit_text = AsyncMock(return_value=message)

        message.bot = make_bot()

        for key, value in kwargs.items():
            setattr(message, key, value)

        return message

    return _make_message


@pytest.fixture
def make_callback(make_user, make_message):
    """Factory fixture for creating mock CallbackQuery objects."""

    def _make_callback(
        data: str = "panel:main",
        user_id: int = 12345,
        message: Message | None = None,
        **kwargs,
    ) -> CallbackQuery:
        callback = MagicMock(spec=CallbackQuery)
        callback.id = "callback-1"
        callback.data = data
        callback.from_user = make_user(id=user_id)
        callback.message = message if message is not None else make_message()
        callback.bot = callback.message.bot
        callback.answer = AsyncMock(return_value=True)

        for key, value in kwargs.items():
            setattr(callback, key, value)

        return callback

    return _make_callback
