"""
ZephyrOS Hello - welcome/settings window for the ZephyrOS desktop.

Entry point: boots the PyQt6 UI and wires the two components:
- Autostart toggle: keeps ~/.config/autostart/<app-id>.desktop on the host
  in step with a checkbox (on by default the first time).
- Hibernation setup: runs /usr/bin/setupHibernate.sh on the host via
  flatpak-spawn + pkexec, once per click.

Runs inside Flatpak; every host change goes through `flatpak-spawn --host`.
"""

import sys
import traceback

from PyQt6.QtWidgets import QApplication, QMessageBox

from zephyros_hello import logger as log
from zephyros_hello.autostart import AutostartController
from zephyros_hello.config import AppConfig
from zephyros_hello.host_bridge import FlatpakHostBridge
from zephyros_hello.privileged_action import PrivilegedActionRunner
from zephyros_hello.ui import HelloWindow


def main() -> None:
    def excepthook(type_, value, tb):
        msg = ''.join(traceback.format_exception(type_, value, tb))
        print(msg, file=sys.stderr)
        try:
            QMessageBox.critical(None, "Unexpected Error", msg)
        except Exception:
            pass
    sys.excepthook = excepthook

    config = AppConfig()
    log.set_level(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName(config.display_name)
    app.setDesktopFileName(config.app_id)

    bridge = FlatpakHostBridge(parent=app)
    autostart = AutostartController(config, bridge)
    autostart.initialize()
    runner = PrivilegedActionRunner(config, bridge)

    window = HelloWindow(autostart, runner)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
