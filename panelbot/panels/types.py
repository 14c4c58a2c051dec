"""Types shared by panel renderers and the panel engine."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field

from aiogram.types import InlineKeyboardMarkup


@dataclass(frozen=True, slots=True)
class PanelRequest:
    """Everything a renderer gets to know about the panel being drawn."""

    user_id: int
    chat_id: int
    panel_id: str
    params: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class PanelRenderResult:
    text: str
    keyboard: InlineKeyboardMarkup


PanelRenderer = Callable[[PanelRequest], Awaitable[PanelRenderResult]]


@dataclass(frozen=True, slots=True)
class ResolvedPanel:
    """A panel id mapped to its renderer.

    `id` is the canonical panel id stored in the session, `params` are the
    extra arguments parsed out of the incoming id.
    """

    renderer: PanelRenderer
    params: list[str]
    id: str
