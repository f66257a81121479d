"""Export orchestration: target resolution, engine invocation and reporting."""

from .engine_locator import EngineLocation
from .folder_picker import FolderPicker
from .orchestrator import ConversionOrchestrator
from .process_invoker import QtProcessInvoker
from .request_builder import ExportRequestBuilder, normalize_directory
from .target_resolver import is_exportable, resolve_target

__all__ = [
    "EngineLocation",
    "FolderPicker",
    "ConversionOrchestrator",
    "QtProcessInvoker",
    "ExportRequestBuilder",
    "normalize_directory",
    "is_exportable",
    "resolve_target",
]
