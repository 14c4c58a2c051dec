"""Session storage on top of aiocache."""

from __future__ import annotations

from datetime import UTC, datetime

import logfire
from aiocache import Cache
from aiocache.base import BaseCache
from pydantic import ValidationError

from panelbot.sessions.models import BotSession

SESSION_KEY_PREFIX = "bot-session:"


def session_key(user_id: int | str) -> str:
    return f"{SESSION_KEY_PREFIX}{user_id}"


class SessionStore:
    """Reads and writes `BotSession` records as JSON blobs.

    Missing or unreadable records never fail a lookup: the caller always gets
    a session back, falling back to a fresh idle one. Last write wins per user.

    Usage:
        store = SessionStore.from_url("memory://")
        session = await store.get(user_id)
        await store.save(session.model_copy(update={"state": PanelState(panel_id="main")}))
    """

    def __init__(self, cache: BaseCache, *, ttl: int | None = None) -> None:
        self.cache = cache
        self.ttl = ttl

    @classmethod
    def from_url(cls, url: str, *, ttl: int | None = None) -> SessionStore:
        """Build a store from a cache URL like "memory://" or "redis://localhost:6379/0"."""
        return cls(Cache.from_url(url), ttl=ttl)

    async def get(self, user_id: int) -> BotSession:
        key = session_key(user_id)
        raw = await self.cache.get(key)
        if raw is None:
            return BotSession.default(user_id)

        try:
            return BotSession.model_validate_json(raw)
        except ValidationError as e:
            logfire.warning(
                "bot_session_malformed",
                user_id=user_id,
                error_count=e.error_count(),
            )
            await self.cache.delete(key)
            return BotSession.default(user_id)

    async def save(self, session: BotSession) -> BotSession:
        """Persist the session with a fresh `updated_at` and return what was stored."""
        stamped = session.model_copy(update={"updated_at": datetime.now(UTC)})
        await self.cache.set(
            session_key(stamped.user_id),
            stamped.model_dump_json(),
            ttl=self.ttl,
        )
        return stamped

    async def clear(self, user_id: int) -> None:
        """Reset the user back to a default idle session."""
        default = BotSession.default(user_id)
        await self.cache.set(
            session_key(user_id), default.model_dump_json(), ttl=self.ttl
        )
        logfire.debug("bot_session_cleared", user_id=user_id)

    async def close(self) -> None:
        await self.cache.close()
