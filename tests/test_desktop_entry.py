from __future__ import annotations

import shlex
import unittest
from pathlib import Path

from zephyros_hello.config import AppConfig
from zephyros_hello.desktop_entry import (
    disable_command,
    enable_command,
    probe_command,
    render_desktop_entry,
)


class DesktopEntryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.config = AppConfig(host_home=Path("/home/theron"))

    def test_render_default_entry(self) -> None:
        self.assertEqual(
            render_desktop_entry(self.config),
            "[Desktop Entry]\n"
            "Type=Application\n"
            "Name=ZephyrOS Hello\n"
            "Exec=buzz.zephyros.hello\n"
            "Icon=buzz.zephyros.hello\n"
            "X-GNOME-Autostart-enabled=true\n",
        )

    def test_enable_command_writes_via_temp_file(self) -> None:
        argv = enable_command(self.config)
        self.assertEqual(argv[:2], ["sh", "-c"])

        target = "/home/theron/.config/autostart/buzz.zephyros.hello.desktop"
        tokens = shlex.split(argv[2])
        self.assertEqual(tokens[:3], ["mkdir", "-p", "/home/theron/.config/autostart"])
        self.assertIn(render_desktop_entry(self.config), tokens)
        self.assertEqual(tokens[-4:], ["mv", "-f", target + ".tmp", target])

    def test_enable_command_quotes_awkward_names(self) -> None:
        config = AppConfig(host_home=Path("/home/o'brien x"), display_name="It's Hello")

        tokens = shlex.split(enable_command(config)[2])

        self.assertIn("/home/o'brien x/.config/autostart", tokens)
        self.assertIn(render_desktop_entry(config), tokens)

    def test_disable_and_probe_commands(self) -> None:
        target = "/home/theron/.config/autostart/buzz.zephyros.hello.desktop"
        self.assertEqual(disable_command(self.config), ["rm", "-f", target])
        self.assertEqual(probe_command(self.config), ["test", "-f", target])


if __name__ == "__main__":
    unittest.main()
