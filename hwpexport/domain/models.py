from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


@dataclass(frozen=True)
class WorkspaceEntry:
    """
    A file or folder as seen by the host workspace.

    `path` is relative to the workspace root and uses "/" separators.
    """

    path: str
    name: str
    is_container: bool = False

    @property
    def extension(self) -> str:
        if self.is_container or "." not in self.name:
            return ""
        return self.name.rsplit(".", 1)[1].lower()

    @property
    def basename(self) -> str:
        if self.is_container or "." not in self.name:
            return self.name
        return self.name.rsplit(".", 1)[0]


@dataclass(frozen=True)
class SingleTarget:
    path: str
    display_name: str


@dataclass(frozen=True)
class BatchTarget:
    root_path: str
    display_name: str


ExportTarget = Union[SingleTarget, BatchTarget]


@dataclass(frozen=True)
class ExportParameters:
    """What the user confirmed in the export dialog."""

    output_name: str | None = None
    output_directory: str = ""
    space_indent: bool = False


@dataclass(frozen=True)
class EngineInvocation:
    """
    One fully specified engine run.

    `args` starts with the script file name; the process runs in
    `working_directory`, which is the script's directory.
    """

    executable: str
    script_path: str
    args: tuple[str, ...]
    working_directory: str

    def command(self) -> list[str]:
        return [self.executable, *self.args]


@dataclass(frozen=True)
class EngineResult:
    exit_code: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class LaunchFailure:
    """The OS refused to start the engine (interpreter missing, spawn denied)."""

    message: str


EngineOutcome = Union[EngineResult, LaunchFailure]


class ReportKind(Enum):
    STARTED = auto()
    SUCCEEDED = auto()
    MISSING_ENGINE = auto()
    EXECUTION_UNAVAILABLE = auto()
    ENGINE_REPORTED_FAILURE = auto()


@dataclass(frozen=True)
class ExportReport:
    kind: ReportKind
    message: str
    detail: str = ""


@dataclass(frozen=True)
class PluginConfig:
    default_export_path: str
