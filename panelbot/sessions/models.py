"""Pydantic models for per-user bot sessions.

A session remembers what the user is doing right now (`state`) and where the
last panel message was rendered (`panel`). Both are serialized to JSON and
kept in the session cache under `bot-session:<user_id>`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class IdleState(BaseModel):
    type: Literal["idle"] = "idle"


class PanelState(BaseModel):
    type: Literal["panel"] = "panel"
    panel_id: str


class BillingSetDateState(BaseModel):
    type: Literal["billing:set-date"] = "billing:set-date"
    project_id: str


class BillingManualState(BaseModel):
    type: Literal["billing:manual"] = "billing:manual"
    project_id: str


class FacebookTokenState(BaseModel):
    type: Literal["facebook:token"] = "facebook:token"


class ProjectEditState(BaseModel):
    type: Literal["project:edit"] = "project:edit"
    project_id: str
    field: Literal["name", "ad", "owner"]


class ChatManualState(BaseModel):
    type: Literal["chat:manual"] = "chat:manual"
    project_id: str


class AutoreportsSetTimeState(BaseModel):
    type: Literal["autoreports:set-time"] = "autoreports:set-time"
    project_id: str


SessionState = Annotated[
    IdleState
    | PanelState
    | BillingSetDateState
    | BillingManualState
    | FacebookTokenState
    | ProjectEditState
    | ChatManualState
    | AutoreportsSetTimeState,
    Field(discriminator="type"),
]


class PanelRef(BaseModel):
    """The last rendered panel message.

    `chat_id` is fixed for the lifetime of a panel; a panel is never moved to
    another chat. `message_thread_id` is None for chats without topics.
    """

    model_config = ConfigDict(frozen=True)

    chat_id: int
    message_id: int
    panel_id: str
    message_thread_id: int | None = None


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BotSession(BaseModel):
    user_id: int
    state: SessionState = Field(default_factory=IdleState)
    panel: PanelRef | None = None
    updated_at: datetime = Field(default_factory=_utcnow)

    @classmethod
    def default(cls, user_id: int) -> BotSession:
        """Fresh session for a user we know nothing about."""
        return cls(user_id=user_id)
