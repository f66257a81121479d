from __future__ import annotations

from concurrent.futures import Future
from typing import Protocol, runtime_checkable

from hwpexport.domain.models import EngineInvocation, EngineOutcome, ExportReport


class IProcessInvoker(Protocol):
    """
    Run one engine invocation without blocking the caller.

    The returned future resolves exactly once, with either an EngineResult or a
    LaunchFailure. It never resolves with an exception.
    """

    def invoke(self, invocation: EngineInvocation) -> Future[EngineOutcome]: ...


class IExportReporter(Protocol):
    """Deliver user-facing outcome messages (notices, dialogs, status bar)."""

    def report(self, report: ExportReport) -> None: ...


@runtime_checkable
class ILogSink(Protocol):
    """Logging surface; the host plugin API satisfies it structurally."""

    def log_debug(self, message: str) -> None: ...
    def log_info(self, message: str) -> None: ...
    def log_warning(self, message: str) -> None: ...
    def log_error(self, message: str) -> None: ...


class IPluginSettings(Protocol):
    """Plugin-scoped string settings, as offered by the host."""

    def get_plugin_setting(
        self,
        plugin_id: str,
        key: str,
        default: str | None = None,
    ) -> str | None: ...

    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None: ...


class NullLog:
    """ILogSink that drops everything."""

    def log_debug(self, message: str) -> None:
        pass

    def log_info(self, message: str) -> None:
        pass

    def log_warning(self, message: str) -> None:
        pass

    def log_error(self, message: str) -> None:
        pass
