"""Handlers that open and navigate control panels."""

import logfire
from aiogram import F, Router
from aiogram.filters import Command, CommandStart
from aiogram.types import CallbackQuery, Message

from panelbot.panels import render_panel
from panelbot.sessions.store import SessionStore

router = Router(name="panels")

COMMAND_PANELS = {
    "start": "cmd:menu",
    "menu": "cmd:menu",
    "projects": "cmd:projects",
    "auth": "cmd:auth",
}


def topic_thread_id(message: Message) -> int | None:
    """Thread of the message, only for real forum topic messages."""
    if message.is_topic_message:
        return message.message_thread_id
    return None


@router.message(CommandStart())
@router.message(Command("menu", "projects", "auth"))
async def cmd_panel(message: Message, session_store: SessionStore) -> None:
    """Open the panel bound to the command."""
    if message.from_user is None:
        return

    command = (message.text or "").split(maxsplit=1)[0].lstrip("/").split("@")[0]
    panel_id = COMMAND_PANELS.get(command.lower(), "cmd:menu")

    await render_panel(
        message.bot,
        session_store,
        user_id=message.from_user.id,
        chat_id=message.chat.id,
        panel_id=panel_id,
        thread_id=topic_thread_id(message),
    )


@router.callback_query(F.data.startswith("panel:") | F.data.startswith("project:"))
async def on_panel_callback(callback: CallbackQuery, session_store: SessionStore) -> None:
    """Navigate between panels from inline keyboard buttons."""
    message = callback.message
    if not isinstance(message, Message):
        # Message is too old to be accessible, nothing to edit or reply to
        await callback.answer()
        return

    try:
        await render_panel(
            callback.bot,
            session_store,
            user_id=callback.from_user.id,
            chat_id=message.chat.id,
            panel_id=callback.data,
            thread_id=topic_thread_id(message),
        )
    except Exception:
        logfire.exception(
            "panel_callback_failed",
            user_id=callback.from_user.id,
            chat_id=message.chat.id,
            data=callback.data,
        )
        await callback.answer("❌ Failed to open panel, try again later.")
        return

    await callback.answer()


@router.message(Command("cancel"))
async def cmd_cancel(message: Message, session_store: SessionStore) -> None:
    """Drop whatever the user was doing and forget the panel message."""
    if message.from_user is None:
        return

    await session_store.clear(message.from_user.id)
    await message.reply("✅ Cancelled. Send /menu to open the panel again.")
