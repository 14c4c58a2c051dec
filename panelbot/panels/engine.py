"""Panel engine: draws a panel and keeps a single live panel message per user.

The panel message remembered in the session is edited in place when the user
interacts from the same chat and topic. Otherwise (first render, another chat
or topic, or the old message can't be edited anymore) a new message is sent,
targeting the thread picked by `resolve_panel_thread_id`.
"""

from __future__ import annotations

import logfire
from aiogram import Bot
from aiogram.exceptions import TelegramAPIError

from panelbot.panels.registry import PanelRegistry, registry as default_registry
from panelbot.panels.threads import resolve_panel_thread_id
from panelbot.panels.types import PanelRenderResult, PanelRequest
from panelbot.sessions.models import BotSession, PanelRef, PanelState
from panelbot.sessions.store import SessionStore

NOT_MODIFIED = "message is not modified"


async def _edit_panel(
    bot: Bot, chat_id: int, message_id: int, result: PanelRenderResult
) -> bool:
    """Edit the panel message in place. Returns False if it has to be re-sent."""
    try:
        await bot.edit_message_text(
            chat_id=chat_id,
            message_id=message_id,
            text=result.text,
            reply_markup=result.keyboard,
        )
    except TelegramAPIError as e:
        if NOT_MODIFIED in e.message:
            return True
        logfire.info(
            "panel_edit_failed",
            chat_id=chat_id,
            message_id=message_id,
            error=e.message,
        )
        return False
    return True


async def render_panel(
    bot: Bot,
    store: SessionStore,
    *,
    user_id: int,
    chat_id: int,
    panel_id: str,
    thread_id: int | None = None,
    registry: PanelRegistry = default_registry,
) -> BotSession:
    """Render `panel_id` for the user and persist where it ended up.

    Args:
        bot: Bot used to edit or send the panel message.
        store: Session store holding the user's session.
        user_id: Telegram user the panel belongs to.
        chat_id: Chat the interaction happened in.
        panel_id: Incoming panel id or command alias (see `route_panel_id`).
        thread_id: Thread of the triggering event, if it came from a topic.
        registry: Renderer registry, the module-level one by default.

    Returns:
        The saved session.
    """
    session = await store.get(user_id)
    resolved = registry.resolve(panel_id)
    result = await resolved.renderer(
        PanelRequest(
            user_id=user_id,
            chat_id=chat_id,
            panel_id=resolved.id,
            params=resolved.params,
        )
    )

    panel = session.panel
    message_id: int | None = None
    message_thread_id: int | None = None

    in_place = panel is not None and panel.chat_id == chat_id
    if in_place and thread_id is not None:
        # Only edit the panel from the topic it lives in
        in_place = thread_id == panel.message_thread_id

    if in_place:
        if await _edit_panel(bot, chat_id, panel.message_id, result):
            message_id = panel.message_id
            message_thread_id = panel.message_thread_id

    if message_id is None:
        message_thread_id = resolve_panel_thread_id(session, chat_id, thread_id)
        sent = await bot.send_message(
            chat_id=chat_id,
            text=result.text,
            reply_markup=result.keyboard,
            message_thread_id=message_thread_id,
        )
        sent_id = getattr(sent, "message_id", None)
        message_id = sent_id if isinstance(sent_id, int) else None

    if message_id is not None:
        panel = PanelRef(
            chat_id=chat_id,
            message_id=message_id,
            panel_id=resolved.id,
            message_thread_id=message_thread_id,
        )

    logfire.debug(
        "panel_rendered",
        user_id=user_id,
        chat_id=chat_id,
        panel_id=resolved.id,
        message_id=message_id,
        thread_id=message_thread_id,
    )

    return await store.save(
        session.model_copy(
            update={"panel": panel, "state": PanelState(panel_id=resolved.id)}
        )
    )
