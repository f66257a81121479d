from __future__ import annotations

import os
from concurrent.futures import Future
from pathlib import Path

import pytest

# Widgets are created in tests; never require a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from hwpexport.domain.models import (  # noqa: E402
    EngineInvocation,
    EngineOutcome,
    ExportReport,
    WorkspaceEntry,
)
from hwpexport.services.engine_locator import EngineLocation  # noqa: E402


# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        if created:
            app.quit()


# ------------------------------
# Test doubles
# ------------------------------


class FakeInvoker:
    """IProcessInvoker double: records invocations, test settles the futures."""

    def __init__(self) -> None:
        self.calls: list[tuple[EngineInvocation, Future]] = []

    def invoke(self, invocation: EngineInvocation) -> Future:
        fut: Future = Future()
        self.calls.append((invocation, fut))
        return fut

    @property
    def invocations(self) -> list[EngineInvocation]:
        return [inv for inv, _ in self.calls]

    def resolve(self, outcome: EngineOutcome, index: int = -1) -> None:
        self.calls[index][1].set_result(outcome)


class RecordingReporter:
    def __init__(self) -> None:
        self.reports: list[ExportReport] = []

    def report(self, report: ExportReport) -> None:
        self.reports.append(report)

    @property
    def kinds(self) -> list:
        return [r.kind for r in self.reports]


class FakeHostAPI:
    """Minimal IHostAPI double backed by dicts and lists."""

    def __init__(self, *, plugin_dir: Path, workspace_root: Path) -> None:
        self.plugin_dir = plugin_dir
        self.workspace_root = workspace_root
        self.selection: WorkspaceEntry | None = None
        self.providers: list = []
        self.settings: dict[tuple[str, str], str] = {}
        self.setting_writes: list[tuple[str, str, str]] = []
        self.messages: list[tuple[str, str, str]] = []
        self.logs: list[tuple[str, str]] = []

    # workspace
    def get_active_selection(self) -> WorkspaceEntry | None:
        return self.selection

    def on_selection_context_action(self, provider) -> None:
        self.providers.append(provider)

    def get_workspace_root(self) -> Path:
        return self.workspace_root

    def get_plugin_dir(self, plugin_id: str) -> Path:
        return self.plugin_dir

    def dialog_parent(self):
        return None

    # messaging
    def show_info(self, title: str, message: str) -> None:
        self.messages.append(("info", title, message))

    def show_warning(self, title: str, message: str) -> None:
        self.messages.append(("warning", title, message))

    def show_error(self, title: str, message: str) -> None:
        self.messages.append(("error", title, message))

    # settings
    def get_plugin_setting(self, plugin_id: str, key: str, default: str | None = None) -> str | None:
        return self.settings.get((plugin_id, key), default)

    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None:
        self.settings[(plugin_id, key)] = value
        self.setting_writes.append((plugin_id, key, value))

    # logging
    def log_debug(self, message: str) -> None:
        self.logs.append(("debug", message))

    def log_info(self, message: str) -> None:
        self.logs.append(("info", message))

    def log_warning(self, message: str) -> None:
        self.logs.append(("warning", message))

    def log_error(self, message: str) -> None:
        self.logs.append(("error", message))


# --- Common fixtures ---


@pytest.fixture()
def fake_invoker() -> FakeInvoker:
    return FakeInvoker()


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def plugin_dir(tmp_path: Path) -> Path:
    """Plugin folder with an installed (empty) engine script."""
    root = tmp_path / "plugin"
    (root / "scripts").mkdir(parents=True)
    (root / "scripts" / "converter.py").write_text("", encoding="utf-8")
    return root


@pytest.fixture()
def engine(plugin_dir: Path) -> EngineLocation:
    return EngineLocation(plugin_dir=plugin_dir)


@pytest.fixture()
def missing_engine(tmp_path: Path) -> EngineLocation:
    return EngineLocation(plugin_dir=tmp_path / "not-installed")


@pytest.fixture()
def host_api(plugin_dir: Path, tmp_path: Path) -> FakeHostAPI:
    vault = tmp_path / "vault"
    vault.mkdir()
    return FakeHostAPI(plugin_dir=plugin_dir, workspace_root=vault)
