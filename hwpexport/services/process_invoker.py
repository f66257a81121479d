from __future__ import annotations

import codecs
from concurrent.futures import Future

from PyQt6.QtCore import QObject, QProcess, QProcessEnvironment

from hwpexport.domain.models import EngineInvocation, EngineOutcome, EngineResult, LaunchFailure


class _EngineRun:
    """
    One engine process and the future it settles.

    Terminal events are QProcess.errorOccurred(FailedToStart) and
    QProcess.finished; whichever comes first wins, the other is ignored.
    """

    def __init__(self, invocation: EngineInvocation, proc: QProcess) -> None:
        self.future: Future[EngineOutcome] = Future()
        self._proc = proc
        self._stdout: list[str] = []
        self._stderr: list[str] = []
        self._stdout_decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._stderr_decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

        proc.setProgram(invocation.executable)
        proc.setArguments(list(invocation.args))
        proc.setWorkingDirectory(invocation.working_directory)

        # Engine prints non-ASCII paths; keep the pipe UTF-8 on every platform
        env = QProcessEnvironment.systemEnvironment()
        env.insert("PYTHONIOENCODING", "utf-8")
        proc.setProcessEnvironment(env)

        proc.readyReadStandardOutput.connect(self._on_stdout)
        proc.readyReadStandardError.connect(self._on_stderr)
        proc.errorOccurred.connect(self._on_error)
        proc.finished.connect(self._on_finished)  # type: ignore[arg-type]

    def start(self) -> None:
        self.future.set_running_or_notify_cancel()
        self._proc.start()

    def _on_stdout(self) -> None:
        data = bytes(self._proc.readAllStandardOutput())
        self._stdout.append(self._stdout_decoder.decode(data))

    def _on_stderr(self) -> None:
        data = bytes(self._proc.readAllStandardError())
        self._stderr.append(self._stderr_decoder.decode(data))

    def _on_error(self, error) -> None:
        # Crashes and read/write errors are followed by finished(); only a
        # failed start never reaches it.
        if error == QProcess.ProcessError.FailedToStart:
            self._settle(LaunchFailure(message=self._proc.errorString()))

    def _on_finished(self, exit_code: int, status) -> None:
        self._on_stdout()
        self._on_stderr()
        self._stdout.append(self._stdout_decoder.decode(b"", final=True))
        self._stderr.append(self._stderr_decoder.decode(b"", final=True))

        code = int(exit_code)
        if status == QProcess.ExitStatus.CrashExit and code == 0:
            code = -1
        self._settle(
            EngineResult(exit_code=code, stdout="".join(self._stdout), stderr="".join(self._stderr))
        )

    def _settle(self, outcome: EngineOutcome) -> None:
        if self.future.done():
            return
        self.future.set_result(outcome)
        self._proc.deleteLater()


class QtProcessInvoker(QObject):
    """
    Runs engine invocations in the background via QProcess.

    Every invoke() gets its own QProcess, buffers and future, so any number of
    exports can run side by side. There is no cancel and no timeout: a hung
    engine keeps its future pending.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._running: set[_EngineRun] = set()

    def invoke(self, invocation: EngineInvocation) -> Future[EngineOutcome]:
        run = _EngineRun(invocation, QProcess(self))
        self._running.add(run)
        run.future.add_done_callback(lambda _f: self._running.discard(run))
        run.start()
        return run.future

    @property
    def running_count(self) -> int:
        return len(self._running)
