from __future__ import annotations

import shutil
import unittest

from fakes import qt_app

from PyQt6.QtCore import QEventLoop, QTimer

from zephyros_hello.host_bridge import FLATPAK_SPAWN, FlatpakHostBridge, LaunchError


@unittest.skipIf(shutil.which("sh") is None, "needs a POSIX shell")
class FlatpakHostBridgeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        # No prefix: run commands locally instead of through flatpak-spawn.
        self.bridge = FlatpakHostBridge(prefix=())

    def test_default_prefix_is_flatpak_spawn(self) -> None:
        bridge = FlatpakHostBridge()
        self.assertEqual(bridge.host_argv(["test", "-f", "/x"]), ["flatpak-spawn", "--host", "test", "-f", "/x"])
        self.assertEqual(bridge.prefix, FLATPAK_SPAWN)

    def test_run_sync_returns_exit_status(self) -> None:
        self.assertEqual(self.bridge.run_sync(["sh", "-c", "exit 0"]), 0)
        self.assertEqual(self.bridge.run_sync(["sh", "-c", "exit 3"]), 3)

    def test_missing_program_raises_launch_error(self) -> None:
        missing = ["zephyros-hello-no-such-program"]
        with self.assertRaises(LaunchError):
            self.bridge.run_sync(missing)
        with self.assertRaises(LaunchError):
            self.bridge.spawn(missing)
        with self.assertRaises(LaunchError) as ctx:
            self.bridge.run_async(missing, lambda ok: None)
        self.assertEqual(ctx.exception.argv, missing)

    def test_missing_bridge_raises_launch_error(self) -> None:
        bridge = FlatpakHostBridge(prefix=("zephyros-hello-no-such-bridge", "--host"))
        with self.assertRaises(LaunchError):
            bridge.run_sync(["true"])

    def _run_async(self, argv: list[str]) -> list[bool]:
        self.app = qt_app()
        loop = QEventLoop()
        results: list[bool] = []

        def done(ok: bool) -> None:
            results.append(ok)
            loop.quit()

        self.bridge.run_async(argv, done)
        QTimer.singleShot(10000, loop.quit)
        if not results:
            loop.exec()
        return results

    def test_run_async_reports_success(self) -> None:
        self.assertEqual(self._run_async(["sh", "-c", "exit 0"]), [True])

    def test_run_async_reports_failure(self) -> None:
        self.assertEqual(self._run_async(["sh", "-c", "exit 1"]), [False])


if __name__ == "__main__":
    unittest.main()
