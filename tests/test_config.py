from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest import mock

from zephyros_hello.config import APP_ID, HIBERNATE_SCRIPT, AppConfig


class AppConfigTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        config = AppConfig()
        self.assertEqual(config.app_id, APP_ID)
        self.assertEqual(config.exec_command, APP_ID)
        self.assertEqual(config.script_path, HIBERNATE_SCRIPT)

    def test_derived_paths(self) -> None:
        config = AppConfig(host_home=Path("/h"), config_home=Path("/c"))
        self.assertEqual(config.host_autostart_path, Path("/h/.config/autostart/buzz.zephyros.hello.desktop"))
        self.assertEqual(config.marker_path, Path("/c/buzz.zephyros.hello/autostart-initialized"))

    def test_config_home_follows_xdg(self) -> None:
        with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": "/xdg"}):
            self.assertEqual(AppConfig().config_home, Path("/xdg"))

    def test_config_home_defaults_to_dot_config(self) -> None:
        env = {k: v for k, v in os.environ.items() if k != "XDG_CONFIG_HOME"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(AppConfig().config_home, Path.home() / ".config")


if __name__ == "__main__":
    unittest.main()
