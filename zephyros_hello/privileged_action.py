"""
Runner for the one-shot privileged hibernation setup.

State machine:

    IDLE --trigger--> RUNNING --ok--> SUCCEEDED   (final, button stays off)
                              --fail-> FAILED --trigger--> RUNNING ...

The UI never pokes at the button directly; it subscribes to the runner and
applies whatever `render(phase)` says.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, List, Optional

from zephyros_hello.config import AppConfig
from zephyros_hello.host_bridge import HostBridge, LaunchError
from zephyros_hello.logger import get_logger

logger = get_logger("privileged_action")

LABEL_IDLE = "Setup Hibernation"
LABEL_RUNNING = "Setting up…"
LABEL_SUCCEEDED = "Setup Complete ✅"
LABEL_FAILED = "Setup Failed ❌"

STYLE_SUGGESTED = "suggested"
STYLE_DESTRUCTIVE = "destructive"


class Phase(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class ButtonView:
    label: str
    enabled: bool
    style: Optional[str]


def render(phase: Phase) -> ButtonView:
    if phase is Phase.RUNNING:
        return ButtonView(LABEL_RUNNING, False, STYLE_SUGGESTED)
    if phase is Phase.SUCCEEDED:
        return ButtonView(LABEL_SUCCEEDED, False, None)
    if phase is Phase.FAILED:
        return ButtonView(LABEL_FAILED, True, STYLE_DESTRUCTIVE)
    return ButtonView(LABEL_IDLE, True, STYLE_SUGGESTED)


def elevated_command(config: AppConfig) -> List[str]:
    return ["pkexec", "sh", "-c", config.script_path]


class PrivilegedActionRunner:
    def __init__(self, config: AppConfig, bridge: HostBridge):
        self.config = config
        self.bridge = bridge
        self.phase = Phase.IDLE
        self._listeners: List[Callable[[ButtonView], None]] = []

    @property
    def view(self) -> ButtonView:
        return render(self.phase)

    def can_trigger(self) -> bool:
        return self.phase in (Phase.IDLE, Phase.FAILED)

    def add_listener(self, callback: Callable[[ButtonView], None]) -> None:
        self._listeners.append(callback)

    def _notify(self) -> None:
        view = render(self.phase)
        for callback in list(self._listeners):
            callback(view)

    def _set_phase(self, phase: Phase) -> None:
        self.phase = phase
        self._notify()

    def trigger(self) -> bool:
        """Start the privileged script. Returns True if a process was launched.

        The phase flips to RUNNING before launching so a re-entrant trigger is
        rejected, but listeners only hear about it once the launch went
        through. A launch error puts the previous phase back.
        """
        if not self.can_trigger():
            logger.debug("Ignoring trigger while %s", self.phase.value)
            return False

        previous = self.phase
        logger.info("Attempting to set up hibernation...")
        self.phase = Phase.RUNNING
        try:
            self.bridge.run_async(elevated_command(self.config), self._on_finished)
        except (LaunchError, OSError) as e:
            logger.error("Failed to launch pkexec: %s", e)
            self._set_phase(previous)
            return False
        # QProcess may report a failed start before run_async returns.
        if self.phase is Phase.RUNNING:
            self._notify()
        return True

    def _on_finished(self, succeeded: bool) -> None:
        if self.phase is not Phase.RUNNING:
            logger.warning("Unexpected completion while %s; ignored", self.phase.value)
            return
        if succeeded:
            logger.info("Hibernation setup complete")
            self._set_phase(Phase.SUCCEEDED)
        else:
            logger.warning("Hibernation setup failed")
            self._set_phase(Phase.FAILED)
