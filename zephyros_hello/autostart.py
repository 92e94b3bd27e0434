"""
Autostart toggle controller.

Keeps the "Start at login" checkbox and the host's autostart descriptor in
step. The checkbox is the source of truth; writes to the host are
fire-and-forget, so a failed write leaves the two out of sync until the
next launch re-probes.
"""

from __future__ import annotations

from dataclasses import dataclass

from zephyros_hello.config import AppConfig
from zephyros_hello.desktop_entry import disable_command, enable_command, probe_command
from zephyros_hello.host_bridge import HostBridge, LaunchError
from zephyros_hello.logger import get_logger
from zephyros_hello.marker_store import MarkerStore

logger = get_logger("autostart")


@dataclass
class AutostartState:
    enabled: bool = False
    initialized: bool = False


class AutostartController:
    def __init__(self, config: AppConfig, bridge: HostBridge, markers: MarkerStore | None = None):
        self.config = config
        self.bridge = bridge
        self.markers = markers or MarkerStore(config.marker_path)
        self.state = AutostartState()

    def probe_host_autostart(self) -> bool:
        try:
            status = self.bridge.run_sync(probe_command(self.config))
        except (LaunchError, OSError) as e:
            logger.error("Failed to check autostart status on host: %s", e)
            return False
        return status == 0

    def ensure_first_run_default(self) -> bool:
        """Turn autostart on the first time the app ever runs.

        Returns True if the default was applied on this call.
        """
        if self.markers.exists():
            self.state.initialized = True
            return False
        logger.info("First run: enabling autostart by default")
        self.state.enabled = True
        self.set_autostart(True)
        self.state.initialized = self.markers.create()
        return True

    def initialize(self) -> AutostartState:
        self.state.enabled = self.probe_host_autostart()
        self.ensure_first_run_default()
        return self.state

    def set_autostart(self, enabled: bool) -> None:
        if enabled:
            argv = enable_command(self.config)
            verb = "enable"
        else:
            argv = disable_command(self.config)
            verb = "disable"
        try:
            self.bridge.spawn(argv)
        except (LaunchError, OSError) as e:
            logger.error("Failed to %s autostart on host: %s", verb, e)
            return
        logger.info("Requested autostart %s on host (%s)", verb, self.config.host_autostart_path)

    def on_toggled(self, enabled: bool) -> None:
        # The toggle is never reverted, even if the host write fails.
        self.state.enabled = bool(enabled)
        self.set_autostart(self.state.enabled)
