"""Forum topic (thread) resolution for panel replies."""

from __future__ import annotations

from panelbot.sessions.models import BotSession


def resolve_panel_thread_id(
    session: BotSession | None,
    current_chat_id: int,
    explicit_thread_id: int | None = None,
) -> int | None:
    """Pick the thread a panel reply should go to.

    The thread of the triggering event always wins. Otherwise the thread
    remembered with the session's panel is reused, but only when that panel
    lives in the same chat: thread ids from another chat mean nothing here.

    Returns:
        Thread id to target, or None to send without thread targeting.
    """
    if explicit_thread_id is not None:
        return explicit_thread_id
    if session is not None and session.panel is not None:
        if session.panel.chat_id == current_chat_id:
            return session.panel.message_thread_id
    return None
