from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Protocol, runtime_checkable

from hwpexport.domain.models import WorkspaceEntry

# -----------------------------------------------------------------------------
# Plugin API versioning
# -----------------------------------------------------------------------------
PLUGIN_API_VERSION = "1.1"

# Host discovers plugin factories under this entry-point group:
# [project.entry-points."pymarkdowneditor.plugins"]
ENTRYPOINT_GROUP = "pymarkdowneditor.plugins"

# -----------------------------------------------------------------------------
# Core metadata + action specs
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class PluginMeta:
    """
    Metadata describing a plugin.

    `id` must be globally unique and stable over time; plugin settings are
    stored under it.
    """

    id: str
    name: str
    version: str
    description: str = ""
    author: str = ""
    homepage: str = ""
    license: str = ""
    requires_app: str = ">=0.0.0"
    requires_plugin_api: str = "==1.*"


MenuName = Literal["File", "Edit", "View", "Tools", "Export", "Help"]


@dataclass(frozen=True)
class ActionSpec:
    """Declarative description of a menu/toolbar action the host surfaces."""

    id: str
    title: str
    menu: str | MenuName
    shortcut: str | None = None
    status_tip: str | None = None
    toolbar: bool = False


@dataclass(frozen=True)
class ContextItemSpec:
    """One item in the workspace explorer's context menu."""

    title: str
    icon: str = ""


ContextItem = tuple[ContextItemSpec, Callable[[], None]]

# Called by the host each time a context menu opens on a workspace entry.
ContextMenuProvider = Callable[[WorkspaceEntry], Sequence[ContextItem]]


# -----------------------------------------------------------------------------
# Host -> Plugin API (no Qt types)
# -----------------------------------------------------------------------------


class IHostAPI(Protocol):
    """
    Capabilities the host workspace exposes to the HWP export plugin.

    Kept narrow: workspace selection and layout, context menu registration,
    messaging, plugin-scoped settings and logging.
    """

    # -----------------------------
    # Workspace
    # -----------------------------
    def get_active_selection(self) -> WorkspaceEntry | None: ...
    def on_selection_context_action(self, provider: ContextMenuProvider) -> None: ...
    def get_workspace_root(self) -> Path: ...
    def get_plugin_dir(self, plugin_id: str) -> Path: ...
    def dialog_parent(self) -> object | None: ...

    # -----------------------------
    # UX messaging
    # -----------------------------
    def show_info(self, title: str, message: str) -> None: ...
    def show_warning(self, title: str, message: str) -> None: ...
    def show_error(self, title: str, message: str) -> None: ...

    # -----------------------------
    # Plugin-scoped settings (strings; JSON-encode structured values)
    # -----------------------------
    def get_plugin_setting(
        self,
        plugin_id: str,
        key: str,
        default: str | None = None,
    ) -> str | None: ...

    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None: ...

    # -----------------------------
    # Logging
    # -----------------------------
    def log_debug(self, message: str) -> None: ...
    def log_info(self, message: str) -> None: ...
    def log_warning(self, message: str) -> None: ...
    def log_error(self, message: str) -> None: ...


# -----------------------------------------------------------------------------
# Plugin contract
# -----------------------------------------------------------------------------


@runtime_checkable
class IPlugin(Protocol):
    """
    Main plugin contract.

    Lifecycle:
      - on_load(api), if implemented, runs once per app start before activate()
      - activate(api) is called when the plugin is enabled
      - deactivate() is called when it is disabled and on shutdown
    """

    meta: PluginMeta

    def activate(self, api: IHostAPI) -> None: ...

    def deactivate(self) -> None: ...

    def register_actions(self) -> Sequence[tuple[ActionSpec, Callable[[IHostAPI], None]]]:
        return ()


@runtime_checkable
class IPluginOnLoad(Protocol):
    """Optional hook: read plugin settings before activate()."""

    def on_load(self, api: IHostAPI) -> None: ...


class BasePlugin:
    """No-op lifecycle; subclasses override what they need."""

    meta: PluginMeta

    def activate(self, api: IHostAPI) -> None:  # pragma: no cover
        self._api = api  # type: ignore[attr-defined]

    def deactivate(self) -> None:  # pragma: no cover
        pass

    def register_actions(
        self,
    ) -> Sequence[tuple[ActionSpec, Callable[[IHostAPI], None]]]:  # pragma: no cover
        return ()

    def on_load(self, api: IHostAPI) -> None:  # pragma: no cover
        _ = api
