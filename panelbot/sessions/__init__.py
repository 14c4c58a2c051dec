"""Per-user bot sessions and their storage."""

from panelbot.sessions.models import (
    AutoreportsSetTimeState,
    BillingManualState,
    BillingSetDateState,
    BotSession,
    ChatManualState,
    FacebookTokenState,
    IdleState,
    PanelRef,
    PanelState,
    ProjectEditState,
    SessionState,
)
from panelbot.sessions.store import SessionStore, session_key

__all__ = [
    # Models
    "BotSession",
    "PanelRef",
    "SessionState",
    # State variants
    "IdleState",
    "PanelState",
    "BillingSetDateState",
    "BillingManualState",
    "FacebookTokenState",
    "ProjectEditState",
    "ChatManualState",
    "AutoreportsSetTimeState",
    # Storage
    "SessionStore",
    "session_key",
]
