"""
PyQt6 window for ZephyrOS Hello.

Provides:
- "Start at login" checkbox, backed by AutostartController.
- "Setup Hibernation" button (and Ctrl+H action), backed by
  PrivilegedActionRunner.

The window holds no state of its own; it renders what the two components
report.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtGui import QAction, QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QCheckBox,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from zephyros_hello.autostart import AutostartController
from zephyros_hello.privileged_action import (
    STYLE_DESTRUCTIVE,
    STYLE_SUGGESTED,
    ButtonView,
    PrivilegedActionRunner,
)

STYLE_SHEETS = {
    STYLE_SUGGESTED: "background-color:#3584e4; color:#ffffff; font-weight:600;",
    STYLE_DESTRUCTIVE: "background-color:#e01b24; color:#ffffff; font-weight:600;",
}


class HelloWindow(QWidget):
    def __init__(
        self,
        autostart: AutostartController,
        runner: PrivilegedActionRunner,
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.autostart = autostart
        self.runner = runner
        config = autostart.config

        self.setWindowTitle(config.display_name)
        self.setWindowIcon(QIcon.fromTheme(config.icon))
        self.resize(460, 240)

        self.title_label = QLabel(f"Welcome to {config.display_name}", self)
        self.title_label.setStyleSheet("font-size:18px; font-weight:600;")

        self.autostart_check = QCheckBox("Start at login", self)
        self.autostart_check.setToolTip("Open this window every time you log in")
        self.hibernate_btn = QPushButton("", self)
        self.hibernate_btn.setToolTip("Needs your password to configure hibernation")

        layout = QVBoxLayout(self)
        layout.addWidget(self.title_label)

        startup_box = QGroupBox("Startup")
        startup_layout = QVBoxLayout(startup_box)
        startup_layout.addWidget(self.autostart_check)
        layout.addWidget(startup_box)

        system_box = QGroupBox("System")
        system_layout = QVBoxLayout(system_box)
        system_layout.addWidget(self.hibernate_btn)
        layout.addWidget(system_box)

        self.hibernate_action = QAction("Setup Hibernation", self)
        self.hibernate_action.setObjectName("hibernate")
        self.hibernate_action.setShortcut(QKeySequence("Ctrl+H"))
        self.addAction(self.hibernate_action)

        # Initial value must not be echoed back to the host.
        self.autostart_check.blockSignals(True)
        self.autostart_check.setChecked(autostart.state.enabled)
        self.autostart_check.blockSignals(False)

        self.autostart_check.toggled.connect(self._on_autostart_toggled)
        self.hibernate_btn.clicked.connect(self._on_hibernate)
        self.hibernate_action.triggered.connect(self._on_hibernate)
        self.runner.add_listener(self.apply_view)

        self.apply_view(self.runner.view)

    def _on_autostart_toggled(self, checked: bool) -> None:
        self.autostart.on_toggled(checked)

    def _on_hibernate(self) -> None:
        self.runner.trigger()

    def apply_view(self, view: ButtonView) -> None:
        self.hibernate_btn.setText(view.label)
        self.hibernate_btn.setEnabled(view.enabled)
        self.hibernate_action.setEnabled(view.enabled)
        self.hibernate_btn.setStyleSheet(style_sheet_for(view.style))


def style_sheet_for(style: Optional[str]) -> str:
    if style is None:
        return ""
    return STYLE_SHEETS.get(style, "")
