from __future__ import annotations

from concurrent.futures import Future

from hwpexport.domain.interfaces import IExportReporter, ILogSink, IProcessInvoker, NullLog
from hwpexport.domain.models import (
    BatchTarget,
    EngineOutcome,
    ExportParameters,
    ExportReport,
    ExportTarget,
    LaunchFailure,
    SingleTarget,
)
from hwpexport.services import reports
from hwpexport.services.engine_locator import EngineLocation
from hwpexport.services.request_builder import ExportRequestBuilder, ensure_hwp_name


class ConversionOrchestrator:
    """
    Runs one export per call: engine check -> engine run -> report.

    Every call returns its own Future[bool] and shares no mutable state with
    other calls, so a second export may start while the first is running.
    Nothing raises across this boundary; failures are reported through the
    reporter and surface as False.

    Batch exports are a single engine run over the whole folder. Only the
    aggregate exit code is known; stderr is logged, not parsed.
    """

    def __init__(
        self,
        *,
        engine: EngineLocation,
        builder: ExportRequestBuilder,
        invoker: IProcessInvoker,
        reporter: IExportReporter,
        log: ILogSink | None = None,
    ) -> None:
        self._engine = engine
        self._builder = builder
        self._invoker = invoker
        self._reporter = reporter
        self._log = log or NullLog()

    def export(self, target: ExportTarget, params: ExportParameters) -> Future[bool]:
        if isinstance(target, BatchTarget):
            return self.convert_batch(target, params)
        return self.convert_single(target, params)

    def convert_single(self, target: SingleTarget, params: ExportParameters) -> Future[bool]:
        file_name = ensure_hwp_name((params.output_name or "").strip() or target.display_name)
        return self._run(
            target,
            params,
            started=reports.single_started(),
            succeeded=reports.single_succeeded(file_name),
            failed=lambda code: reports.single_failed(file_name, code),
        )

    def convert_batch(self, target: BatchTarget, params: ExportParameters) -> Future[bool]:
        return self._run(
            target,
            params,
            started=reports.batch_started(target.display_name),
            succeeded=reports.batch_succeeded(),
            failed=reports.batch_failed,
        )

    # ----------------------------- internals -----------------------------

    def _run(self, target: ExportTarget, params: ExportParameters, *, started, succeeded, failed) -> Future[bool]:
        done: Future[bool] = Future()

        missing = self._engine.missing_path()
        if missing is not None:
            self._log.log_error(f"[HWP Export] Engine missing: {missing}")
            self._reporter.report(reports.missing_engine(missing))
            done.set_result(False)
            return done

        invocation = self._builder.build_invocation(target, params)
        self._reporter.report(started)
        self._log.log_info(f"[HWP Export] Running: {' '.join(invocation.command())}")

        def _on_done(run: Future[EngineOutcome]) -> None:
            ok = False
            try:
                ok = self._finish(run.result(), succeeded, failed)
            finally:
                done.set_result(ok)

        self._invoker.invoke(invocation).add_done_callback(_on_done)
        return done

    def _finish(self, outcome: EngineOutcome, succeeded: ExportReport, failed) -> bool:
        if isinstance(outcome, LaunchFailure):
            self._log.log_error(f"[HWP Export] Spawn error: {outcome.message}")
            self._reporter.report(reports.execution_unavailable(outcome.message))
            return False

        if outcome.stdout.strip():
            self._log.log_debug(f"[Engine]: {outcome.stdout.rstrip()}")
        if outcome.stderr.strip():
            self._log.log_error(f"[Engine Error]: {outcome.stderr.rstrip()}")

        if outcome.ok:
            self._reporter.report(succeeded)
            return True

        self._log.log_warning(f"[HWP Export] Engine exited with code {outcome.exit_code}")
        self._reporter.report(failed(outcome.exit_code))
        return False
