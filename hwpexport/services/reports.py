from __future__ import annotations

from pathlib import Path

from hwpexport.domain.models import ExportReport, ReportKind


def missing_engine(missing: Path) -> ExportReport:
    return ExportReport(
        ReportKind.MISSING_ENGINE,
        f"Error: the HWP converter is not installed correctly. Missing:\n{missing}",
        detail=str(missing),
    )


def execution_unavailable(os_message: str) -> ExportReport:
    return ExportReport(
        ReportKind.EXECUTION_UNAVAILABLE,
        "Could not run Python. Check that Python is installed and on your PATH.\n"
        f"{os_message}",
        detail=os_message,
    )


def single_started() -> ExportReport:
    return ExportReport(ReportKind.STARTED, "Converting to HWP…")


def single_succeeded(file_name: str) -> ExportReport:
    return ExportReport(ReportKind.SUCCEEDED, f"Saved: {file_name}")


def single_failed(file_name: str, exit_code: int) -> ExportReport:
    return ExportReport(
        ReportKind.ENGINE_REPORTED_FAILURE,
        f"Failed: {file_name}",
        detail=f"exit code {exit_code}",
    )


def batch_started(folder_name: str) -> ExportReport:
    return ExportReport(ReportKind.STARTED, f"Folder conversion started: {folder_name}")


def batch_succeeded() -> ExportReport:
    return ExportReport(ReportKind.SUCCEEDED, "Batch conversion complete.")


def batch_failed(exit_code: int) -> ExportReport:
    return ExportReport(
        ReportKind.ENGINE_REPORTED_FAILURE,
        "An error occurred during batch conversion.",
        detail=f"exit code {exit_code}",
    )
