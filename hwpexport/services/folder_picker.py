from __future__ import annotations

from concurrent.futures import Future

from hwpexport.domain.interfaces import IExportReporter, ILogSink, IProcessInvoker, NullLog
from hwpexport.domain.models import EngineOutcome, LaunchFailure
from hwpexport.services import reports
from hwpexport.services.engine_locator import EngineLocation
from hwpexport.services.request_builder import folder_picker_invocation


class FolderPicker:
    """
    Asks the engine to show the native folder dialog (`--pick-folder`).

    The engine prints the chosen folder on one line and exits 0; an empty line
    or a non-zero exit means the user cancelled. The returned future resolves
    to the trimmed path or None and never carries an exception.
    """

    def __init__(
        self,
        *,
        engine: EngineLocation,
        invoker: IProcessInvoker,
        reporter: IExportReporter,
        log: ILogSink | None = None,
    ) -> None:
        self._engine = engine
        self._invoker = invoker
        self._reporter = reporter
        self._log = log or NullLog()

    def pick_folder(self) -> Future[str | None]:
        picked: Future[str | None] = Future()

        missing = self._engine.missing_path()
        if missing is not None:
            self._reporter.report(reports.missing_engine(missing))
            picked.set_result(None)
            return picked

        self._log.log_debug(f"[HWP Export] Script dir: {self._engine.script_dir}")

        def _on_done(run: Future[EngineOutcome]) -> None:
            chosen = None
            try:
                chosen = self._interpret(run.result())
            finally:
                picked.set_result(chosen)

        self._invoker.invoke(folder_picker_invocation(self._engine)).add_done_callback(_on_done)
        return picked

    def _interpret(self, outcome: EngineOutcome) -> str | None:
        if isinstance(outcome, LaunchFailure):
            self._log.log_error(f"[HWP Export] Folder picker failed to start: {outcome.message}")
            self._reporter.report(reports.execution_unavailable(outcome.message))
            return None

        trimmed = outcome.stdout.strip()
        if outcome.exit_code == 0 and trimmed:
            return trimmed
        return None
