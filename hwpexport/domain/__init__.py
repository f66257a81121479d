"""Domain layer: interfaces and simple models (dataclasses)."""

from .interfaces import IExportReporter, ILogSink, IPluginSettings, IProcessInvoker, NullLog
from .models import (
    BatchTarget,
    EngineInvocation,
    EngineOutcome,
    EngineResult,
    ExportParameters,
    ExportReport,
    ExportTarget,
    LaunchFailure,
    PluginConfig,
    ReportKind,
    SingleTarget,
    WorkspaceEntry,
)

__all__ = [
    "IProcessInvoker",
    "IExportReporter",
    "ILogSink",
    "IPluginSettings",
    "NullLog",
    "WorkspaceEntry",
    "SingleTarget",
    "BatchTarget",
    "ExportTarget",
    "ExportParameters",
    "EngineInvocation",
    "EngineResult",
    "LaunchFailure",
    "EngineOutcome",
    "ReportKind",
    "ExportReport",
    "PluginConfig",
]
