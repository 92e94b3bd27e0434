"""
Application identifiers and filesystem locations.

Everything the window needs to know about where it lives is gathered in a
single frozen `AppConfig` so tests can swap in temporary directories.
- Host descriptor: <host home>/.config/autostart/<app_id>.desktop
- Local marker: <XDG_CONFIG_HOME or ~/.config>/<app_id>/autostart-initialized
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

APP_ID = "buzz.zephyros.hello"
APP_NAME = "ZephyrOS Hello"
HIBERNATE_SCRIPT = "/usr/bin/setupHibernate.sh"
MARKER_NAME = "autostart-initialized"


def _default_config_home() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base)
    return Path.home() / ".config"


@dataclass(frozen=True)
class AppConfig:
    app_id: str = APP_ID
    display_name: str = APP_NAME
    exec_command: str = APP_ID
    icon: str = APP_ID
    script_path: str = HIBERNATE_SCRIPT
    marker_name: str = MARKER_NAME
    # Inside the sandbox $HOME is shared with the host, so the host home is
    # the same path we see.
    host_home: Path = field(default_factory=Path.home)
    config_home: Path = field(default_factory=_default_config_home)
    log_level: str = "INFO"

    @property
    def host_autostart_dir(self) -> Path:
        return self.host_home / ".config" / "autostart"

    @property
    def host_autostart_path(self) -> Path:
        return self.host_autostart_dir / f"{self.app_id}.desktop"

    @property
    def local_config_dir(self) -> Path:
        return self.config_home / self.app_id

    @property
    def marker_path(self) -> Path:
        return self.local_config_dir / self.marker_name
