from .export_dialog import ExportDialog
from .host_reporter import HostReporter

__all__ = ["ExportDialog", "HostReporter"]
