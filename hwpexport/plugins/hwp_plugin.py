from __future__ import annotations

from collections.abc import Callable, Sequence
from concurrent.futures import Future

from PyQt6.QtWidgets import QDialog

from hwpexport.domain.interfaces import IProcessInvoker
from hwpexport.domain.models import (
    ExportParameters,
    ExportTarget,
    PluginConfig,
    WorkspaceEntry,
)
from hwpexport.plugins.api import (
    ActionSpec,
    BasePlugin,
    ContextItem,
    ContextItemSpec,
    IHostAPI,
    IPluginOnLoad,
    PluginMeta,
)
from hwpexport.services.config.plugin_config import SettingsPluginConfigStore
from hwpexport.services.engine_locator import EngineLocation
from hwpexport.services.folder_picker import FolderPicker
from hwpexport.services.orchestrator import ConversionOrchestrator
from hwpexport.services.process_invoker import QtProcessInvoker
from hwpexport.services.request_builder import ExportRequestBuilder
from hwpexport.services.target_resolver import is_exportable, resolve_target
from hwpexport.services.ui.export_dialog import ExportDialog
from hwpexport.services.ui.host_reporter import HostReporter
from hwpexport.utils.constants import ENGINE_EXECUTABLE, PLUGIN_ID, PLUGIN_NAME


class HwpExportPlugin(BasePlugin, IPluginOnLoad):
    """
    Exports Markdown notes, or whole folders of them, to HWP.

    Behavior:
      - on_load(): loads the plugin config once (self-healing a known bad path).
      - activate(): wires engine location, process invoker, folder picker and
        reporter, and registers the explorer context menu items.
      - "Export to HWP…" acts on the active selection; context items act on
        the clicked entry. Only .md files and folders are offered.
      - "Set Default HWP Export Folder…" picks a folder through the engine and
        saves it as the folder the export dialog starts in.
      - Each export reads the default folder at its start and runs as its own
        engine process; several exports may run at once.
    """

    meta = PluginMeta(
        id=PLUGIN_ID,
        name=PLUGIN_NAME,
        version="1.0.0",
        description="Export Markdown notes and folders to HWP documents.",
        author="PyMarkdownEditor",
        homepage="",
        license="Apache-2.0",
        requires_app=">=0.0.0",
        requires_plugin_api="==1.*",
    )

    def __init__(
        self,
        *,
        executable: str = ENGINE_EXECUTABLE,
        invoker_factory: Callable[[], IProcessInvoker] = QtProcessInvoker,
        dialog_factory: Callable[..., ExportDialog] = ExportDialog,
    ) -> None:
        self._executable = executable
        self._invoker_factory = invoker_factory
        self._dialog_factory = dialog_factory

        self._api: IHostAPI | None = None
        self._store: SettingsPluginConfigStore | None = None
        self._config: PluginConfig | None = None
        self._engine: EngineLocation | None = None
        self._invoker: IProcessInvoker | None = None
        self._reporter: HostReporter | None = None
        self._picker: FolderPicker | None = None

    # -----------------------------
    # Lifecycle + optional hooks
    # -----------------------------

    def on_load(self, api: IHostAPI) -> None:
        self._store = SettingsPluginConfigStore(settings=api, log=api)
        self._config = self._store.load()

    def activate(self, api: IHostAPI) -> None:
        if self._config is None:
            self.on_load(api)

        self._api = api
        self._engine = EngineLocation(
            plugin_dir=api.get_plugin_dir(self.meta.id),
            executable=self._executable,
        )
        self._invoker = self._invoker_factory()
        self._reporter = HostReporter(api)
        self._picker = FolderPicker(
            engine=self._engine,
            invoker=self._invoker,
            reporter=self._reporter,
            log=api,
        )
        api.on_selection_context_action(self._context_items)
        api.log_info("Loading HWP Export plugin")

    def deactivate(self) -> None:
        if self._api is not None:
            self._api.log_info("Unloading HWP Export plugin")
        # Running engine processes keep their own futures; nothing to cancel.
        self._api = None
        self._picker = None
        self._reporter = None

    # -----------------------------
    # Actions
    # -----------------------------

    def register_actions(self) -> Sequence[tuple[ActionSpec, Callable[[IHostAPI], None]]]:
        return [
            (
                ActionSpec(
                    id=f"{PLUGIN_ID}.export",
                    title="Export to HWP…",
                    menu="Export",
                    status_tip="Convert the selected note or folder to HWP",
                ),
                self._export_selection,
            ),
            (
                ActionSpec(
                    id=f"{PLUGIN_ID}.default_folder",
                    title="Set Default HWP Export Folder…",
                    menu="Export",
                    status_tip="Choose the folder the export dialog starts in",
                ),
                lambda api: self.choose_default_export_path(),
            ),
        ]

    # -----------------------------
    # Settings
    # -----------------------------

    @property
    def config(self) -> PluginConfig | None:
        return self._config

    def set_default_export_path(self, value: str) -> None:
        if self._store is None or self._config is None:
            raise RuntimeError("HWP Export plugin settings are not loaded yet.")
        self._config = self._store.update_default_export_path(self._config, value)

    def choose_default_export_path(self) -> Future[str | None]:
        """Ask the engine for a folder and save it as the default; None when cancelled."""
        api = self._require_api()
        if self._picker is None:
            raise RuntimeError("HWP Export plugin is not active.")

        picked = self._picker.pick_folder()

        def _on_picked(f: Future[str | None]) -> None:
            path = f.result()
            if not path:
                return
            self.set_default_export_path(path)
            api.show_info(PLUGIN_NAME, f"Default export folder: {path}")

        picked.add_done_callback(_on_picked)
        return picked

    # -----------------------------
    # Export flow
    # -----------------------------

    def open_export(self, entry: WorkspaceEntry) -> Future[bool] | None:
        """Ask for parameters and start the export; None when the dialog is cancelled."""
        api = self._require_api()
        target = resolve_target(entry)

        dlg = self._dialog_factory(
            target,
            self._default_path(),
            self._picker.pick_folder if self._picker is not None else None,
            api.dialog_parent(),
        )
        if dlg.exec() != QDialog.DialogCode.Accepted.value:
            return None
        return self.run_export(target, dlg.parameters())

    def run_export(self, target: ExportTarget, params: ExportParameters) -> Future[bool]:
        api = self._require_api()
        if self._engine is None or self._invoker is None or self._reporter is None:
            raise RuntimeError("HWP Export plugin is not active.")

        builder = ExportRequestBuilder(
            engine=self._engine,
            workspace_root=api.get_workspace_root(),
            fallback_directory=self._default_path(),
        )
        orchestrator = ConversionOrchestrator(
            engine=self._engine,
            builder=builder,
            invoker=self._invoker,
            reporter=self._reporter,
            log=api,
        )
        return orchestrator.export(target, params)

    # -----------------------------
    # Implementation
    # -----------------------------

    def _export_selection(self, api: IHostAPI) -> None:
        entry = api.get_active_selection()
        if entry is None or not is_exportable(entry):
            api.show_warning(PLUGIN_NAME, "Select a Markdown note or a folder to export.")
            return
        self.open_export(entry)

    def _context_items(self, entry: WorkspaceEntry) -> list[ContextItem]:
        if not is_exportable(entry):
            return []
        if entry.is_container:
            spec = ContextItemSpec(title="Export Folder to HWP…", icon="folder")
        else:
            spec = ContextItemSpec(title="Export to HWP…", icon="document")
        return [(spec, lambda: self.open_export(entry))]

    def _default_path(self) -> str:
        if self._store is None or self._config is None:
            raise RuntimeError("HWP Export plugin settings are not loaded yet.")
        return self._store.effective_export_path(self._config)

    def _require_api(self) -> IHostAPI:
        if self._api is None:
            raise RuntimeError("HWP Export plugin is not active.")
        return self._api
