from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hwpexport.utils.constants import ENGINE_DIR, ENGINE_EXECUTABLE, ENGINE_SCRIPT


@dataclass(frozen=True)
class EngineLocation:
    """
    Where the conversion engine lives and what runs it.

    The engine is a script under `<plugin_dir>/scripts`, started by an
    interpreter looked up on PATH unless `executable` is absolute.
    """

    plugin_dir: Path
    executable: str = ENGINE_EXECUTABLE
    script_name: str = ENGINE_SCRIPT

    @property
    def script_dir(self) -> Path:
        return self.plugin_dir / ENGINE_DIR

    @property
    def script_path(self) -> Path:
        return self.script_dir / self.script_name

    def missing_path(self) -> Path | None:
        """First missing piece of the engine install, or None when complete."""
        if not self.script_dir.is_dir():
            return self.script_dir
        if not self.script_path.is_file():
            return self.script_path
        return None
