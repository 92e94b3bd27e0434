"""
Autostart descriptor (.desktop file) rendering and host commands.

We cannot write to the host's ~/.config/autostart directly, so the file is
produced by a shell one-liner executed on the host: write to a temporary
sibling, then rename over the final path.
"""

from __future__ import annotations

import shlex
from typing import List

from zephyros_hello.config import AppConfig


def render_desktop_entry(config: AppConfig) -> str:
    lines = [
        "[Desktop Entry]",
        "Type=Application",
        f"Name={config.display_name}",
        f"Exec={config.exec_command}",
        f"Icon={config.icon}",
        "X-GNOME-Autostart-enabled=true",
    ]
    return "\n".join(lines) + "\n"


def enable_command(config: AppConfig) -> List[str]:
    """Host argv that (re)creates the autostart descriptor."""
    target = str(config.host_autostart_path)
    tmp = target + ".tmp"
    script = " && ".join([
        f"mkdir -p {shlex.quote(str(config.host_autostart_dir))}",
        f"printf '%s' {shlex.quote(render_desktop_entry(config))} > {shlex.quote(tmp)}",
        f"mv -f {shlex.quote(tmp)} {shlex.quote(target)}",
    ])
    return ["sh", "-c", script]


def disable_command(config: AppConfig) -> List[str]:
    return ["rm", "-f", str(config.host_autostart_path)]


def probe_command(config: AppConfig) -> List[str]:
    return ["test", "-f", str(config.host_autostart_path)]
