"""Mapping of panel ids and command aliases to renderers."""

from __future__ import annotations

from collections.abc import Callable

from panelbot.panels.types import PanelRenderer, ResolvedPanel

MAIN = "main"
PROJECTS = "projects"
PROJECT = "project"
FB_AUTH = "fb-auth"

_ALIASES: dict[str, tuple[str, tuple[str, ...], str]] = {
    # incoming id: (renderer key, params, canonical id)
    "panel:main": (MAIN, (), "main"),
    "cmd:menu": (MAIN, (), "main"),
    "main": (MAIN, (), "main"),
    "panel:projects": (PROJECTS, (), "projects"),
    "cmd:projects": (PROJECTS, (), "projects"),
    "panel:projects:list": (PROJECTS, ("list",), "projects:list"),
    "project:list": (PROJECTS, ("list",), "projects:list"),
    "project:menu": (MAIN, (), "main"),
    "panel:fb-auth": (FB_AUTH, (), "fb-auth"),
    "cmd:auth": (FB_AUTH, (), "fb-auth"),
}


def route_panel_id(panel_id: str) -> tuple[str, list[str], str]:
    """Parse an incoming panel id into (renderer key, params, canonical id).

    Unknown ids land on the main panel.
    """
    if alias := _ALIASES.get(panel_id):
        key, params, canonical = alias
        return key, list(params), canonical
    if panel_id.startswith("project:add:"):
        return PROJECTS, ["bind", panel_id.split(":")[2]], panel_id
    if panel_id.startswith("project:card:"):
        return PROJECT, [panel_id.split(":")[2]], panel_id
    return MAIN, [], "main"


class PanelRegistry:
    """Renderers keyed by renderer name.

    Usage:
        @registry.register("projects")
        async def render_projects(request: PanelRequest) -> PanelRenderResult:
            ...

        resolved = registry.resolve("cmd:projects")
        result = await resolved.renderer(request)
    """

    def __init__(self) -> None:
        self._renderers: dict[str, PanelRenderer] = {}

    def register(self, key: str) -> Callable[[PanelRenderer], PanelRenderer]:
        def decorator(renderer: PanelRenderer) -> PanelRenderer:
            self._renderers[key] = renderer
            return renderer

        return decorator

    def __contains__(self, key: str) -> bool:
        return key in self._renderers

    def get(self, key: str) -> PanelRenderer:
        """Renderer for `key`, falling back to the main panel."""
        renderer = self._renderers.get(key) or self._renderers.get(MAIN)
        if renderer is None:
            raise LookupError(f"No renderer for panel {key!r} and no main panel")
        return renderer

    def resolve(self, panel_id: str) -> ResolvedPanel:
        key, params, canonical = route_panel_id(panel_id)
        return ResolvedPanel(renderer=self.get(key), params=params, id=canonical)


registry = PanelRegistry()
