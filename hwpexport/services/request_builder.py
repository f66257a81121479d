from __future__ import annotations

from pathlib import PurePath, PurePosixPath, PureWindowsPath

from hwpexport.domain.models import (
    EngineInvocation,
    ExportParameters,
    ExportTarget,
    SingleTarget,
)
from hwpexport.services.config.plugin_config import platform_default_export_path
from hwpexport.services.engine_locator import EngineLocation
from hwpexport.utils.constants import (
    FLAG_BATCH_FOLDER,
    FLAG_PICK_FOLDER,
    FLAG_SPACE_INDENT,
    HWP_EXTENSION,
)


def _flavor(root: PurePath) -> type[PurePath]:
    return PureWindowsPath if isinstance(root, PureWindowsPath) else PurePosixPath


def normalize_directory(text: str, flavor: type[PurePath] = PurePosixPath) -> str:
    """Drop trailing and doubled separators; normalizing twice changes nothing.

    Both `/` and `\\` count as trailing separators whatever the flavor. A bare
    root such as `/` or `C:\\` is kept as is.
    """
    raw = text.strip()
    trimmed = raw.rstrip("\\/")
    if not trimmed or trimmed.endswith(":"):
        return str(flavor(raw))
    return str(flavor(trimmed))


def ensure_hwp_name(name: str) -> str:
    if name.lower().endswith(HWP_EXTENSION):
        return name
    return name + HWP_EXTENSION


def engine_invocation(engine: EngineLocation, args: list[str]) -> EngineInvocation:
    return EngineInvocation(
        executable=engine.executable,
        script_path=str(engine.script_path),
        args=(engine.script_name, *args),
        working_directory=str(engine.script_dir),
    )


def folder_picker_invocation(engine: EngineLocation) -> EngineInvocation:
    return engine_invocation(engine, [FLAG_PICK_FOLDER])


class ExportRequestBuilder:
    """
    Turns a target plus confirmed parameters into an engine invocation.

    Pure data transformation: no filesystem access, no errors. Paths are
    composed with the same path flavor as `workspace_root`, so a Windows vault
    yields Windows paths whatever the test machine is.
    """

    def __init__(
        self,
        *,
        engine: EngineLocation,
        workspace_root: PurePath,
        fallback_directory: str | None = None,
    ) -> None:
        self._engine = engine
        self._root = workspace_root
        self._flavor = _flavor(workspace_root)
        self._fallback_directory = fallback_directory

    def build_invocation(self, target: ExportTarget, params: ExportParameters) -> EngineInvocation:
        out_dir = self._flavor(self.output_directory(params))

        if isinstance(target, SingleTarget):
            name = (params.output_name or "").strip() or target.display_name
            args = [
                self._absolute(target.path),
                str(out_dir / ensure_hwp_name(name)),
            ]
        else:
            args = [FLAG_BATCH_FOLDER, self._absolute(target.root_path), str(out_dir)]

        if params.space_indent:
            args.append(FLAG_SPACE_INDENT)
        return engine_invocation(self._engine, args)

    def output_directory(self, params: ExportParameters) -> str:
        """User directory, or the fallback when left blank, without trailing separators.

        Never blank: without a usable fallback the desktop folder is used.
        """
        raw = (
            params.output_directory.strip()
            or (self._fallback_directory or "").strip()
            or platform_default_export_path()
        )
        return normalize_directory(raw, self._flavor)

    def _absolute(self, relative: str) -> str:
        rel = relative.strip("/")
        if not rel:
            return str(self._root)
        return str(self._root / rel)
