"""Main menu panel, also the fallback for unknown panel ids."""

from aiogram.types import InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from panelbot.panels.registry import MAIN, registry
from panelbot.panels.types import PanelRenderResult, PanelRequest


def build_main_menu_keyboard() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.button(text="📂 Projects", callback_data="panel:projects")
    builder.button(text="🔑 Facebook auth", callback_data="panel:fb-auth")
    builder.button(text="🔄 Refresh", callback_data="panel:main")
    builder.adjust(2, 1)
    return builder.as_markup()


@registry.register(MAIN)
async def render_main(request: PanelRequest) -> PanelRenderResult:
    text = (
        "🏠 <b>Control panel</b>\n\n"
        "Pick a section below. This message is updated in place, "
        "so you can keep using the same buttons."
    )
    return PanelRenderResult(text=text, keyboard=build_main_menu_keyboard())
