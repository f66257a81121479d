from __future__ import annotations

from hwpexport.domain.models import ExportReport, ReportKind
from hwpexport.plugins.api import IHostAPI
from hwpexport.utils.constants import PLUGIN_NAME


class HostReporter:
    """
    IExportReporter backed by the host's messaging and logging.

    Start notices only go to the log; outcomes reach the user. Failure details
    (exit codes, OS errors) are logged but kept out of the dialog text except
    where the message already names them.
    """

    def __init__(self, api: IHostAPI, *, title: str = PLUGIN_NAME) -> None:
        self._api = api
        self._title = title

    def report(self, report: ExportReport) -> None:
        if report.kind is ReportKind.STARTED:
            self._api.log_info(f"[HWP Export] {report.message}")
            return

        if report.kind is ReportKind.SUCCEEDED:
            self._api.log_info(f"[HWP Export] {report.message}")
            self._api.show_info(self._title, report.message)
            return

        detail = f" ({report.detail})" if report.detail else ""
        self._api.log_error(f"[HWP Export] {report.kind.name}: {report.message}{detail}")
        self._api.show_error(self._title, report.message)
