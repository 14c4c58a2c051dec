"""Panel rendering: registry, engine and built-in panels."""

from panelbot.panels import main  # noqa: F401  registers the main panel
from panelbot.panels.engine import render_panel
from panelbot.panels.registry import PanelRegistry
from panelbot.panels.threads import resolve_panel_thread_id
from panelbot.panels.types import (
    PanelRenderer,
    PanelRenderResult,
    PanelRequest,
    ResolvedPanel,
)

__all__ = [
    "PanelRegistry",
    "PanelRenderResult",
    "PanelRenderer",
    "PanelRequest",
    "ResolvedPanel",
    "render_panel",
    "resolve_panel_thread_id",
]
