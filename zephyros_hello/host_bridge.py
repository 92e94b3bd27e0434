"""
Sandbox bridge for running commands on the host.

The app runs inside Flatpak, so the user's real ~/.config and the system
scripts live outside our namespace. Every host command goes through
`flatpak-spawn --host`, wrapped here behind a small `HostBridge` interface:

- run_sync: blocking, returns the exit status (used for quick `test -f` probes).
- spawn: fire-and-forget.
- run_async: QProcess-backed; reports success/failure once, on the Qt event loop.

A program that cannot be started raises `LaunchError` synchronously where
possible, so callers can tell "never ran" apart from "ran and failed".
"""

from __future__ import annotations

import shutil
import subprocess
from typing import Callable, List, Optional, Sequence, Set

from PyQt6.QtCore import QObject, QProcess

from zephyros_hello.logger import get_logger

logger = get_logger("host_bridge")

FLATPAK_SPAWN = ("flatpak-spawn", "--host")
PROBE_TIMEOUT_SECONDS = 10


class LaunchError(RuntimeError):
    """The command could not be started at all."""

    def __init__(self, argv: Sequence[str], reason: str):
        super().__init__(f"{argv[0] if argv else '<empty>'}: {reason}")
        self.argv = list(argv)
        self.reason = reason


class HostBridge:
    def __init__(self, prefix: Sequence[str] = FLATPAK_SPAWN):
        self.prefix = tuple(prefix)

    def host_argv(self, argv: Sequence[str]) -> List[str]:
        return [*self.prefix, *argv]

    def run_sync(self, argv: Sequence[str]) -> int:
        raise NotImplementedError

    def spawn(self, argv: Sequence[str]) -> None:
        raise NotImplementedError

    def run_async(self, argv: Sequence[str], on_finished: Callable[[bool], None]) -> None:
        raise NotImplementedError


class FlatpakHostBridge(HostBridge):
    def __init__(self, prefix: Sequence[str] = FLATPAK_SPAWN, parent: Optional[QObject] = None):
        super().__init__(prefix)
        self._parent = parent
        # Keep running QProcess objects alive until they report back.
        self._running: Set[QProcess] = set()

    @staticmethod
    def _resolve(argv: Sequence[str]) -> str:
        if not argv:
            raise LaunchError(argv, "empty command")
        program = shutil.which(argv[0])
        if program is None:
            raise LaunchError(argv, "program not found")
        return program

    def run_sync(self, argv: Sequence[str]) -> int:
        full = self.host_argv(argv)
        program = self._resolve(full)
        try:
            completed = subprocess.run(
                [program, *full[1:]],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                timeout=PROBE_TIMEOUT_SECONDS,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise LaunchError(full, f"timed out after {PROBE_TIMEOUT_SECONDS}s") from e
        except OSError as e:
            raise LaunchError(full, str(e)) from e
        return completed.returncode

    def spawn(self, argv: Sequence[str]) -> None:
        full = self.host_argv(argv)
        program = self._resolve(full)
        try:
            subprocess.Popen(
                [program, *full[1:]],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
            )
        except OSError as e:
            raise LaunchError(full, str(e)) from e
        logger.debug("Spawned on host: %s", full)

    def run_async(self, argv: Sequence[str], on_finished: Callable[[bool], None]) -> None:
        full = self.host_argv(argv)
        program = self._resolve(full)

        proc = QProcess(self._parent)
        proc.setProcessChannelMode(QProcess.ProcessChannelMode.ForwardedChannels)
        reported = False

        def _report(succeeded: bool) -> None:
            nonlocal reported
            if reported:
                return
            reported = True
            self._running.discard(proc)
            proc.deleteLater()
            on_finished(succeeded)

        def _on_finished(exit_code: int, exit_status: QProcess.ExitStatus) -> None:
            if exit_status != QProcess.ExitStatus.NormalExit:
                logger.warning("Host command crashed: %s", full)
                _report(False)
                return
            if exit_code != 0:
                logger.warning("Host command exited with %s: %s", exit_code, full)
            _report(exit_code == 0)

        def _on_error(error: QProcess.ProcessError) -> None:
            # FailedToStart never emits finished().
            if error == QProcess.ProcessError.FailedToStart:
                logger.error("Host command failed to start: %s", full)
                _report(False)

        proc.finished.connect(_on_finished)
        proc.errorOccurred.connect(_on_error)
        self._running.add(proc)
        proc.start(program, full[1:])
        logger.debug("Started on host: %s", full)
