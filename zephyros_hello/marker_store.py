"""
First-run marker persistence.

The only thing ZephyrOS Hello remembers is that it has already applied the
"autostart on" default once. That fact is stored as the existence of an empty
file; its content is never read.
"""

from __future__ import annotations

from pathlib import Path

from zephyros_hello.logger import get_logger

logger = get_logger("marker_store")


class MarkerStore:
    def __init__(self, marker_path: Path):
        self.marker_path = marker_path

    def exists(self) -> bool:
        return self.marker_path.exists()

    def create(self) -> bool:
        """Create the marker. Returns False if it could not be written.

        A marker that already exists (another instance won the race) counts
        as success.
        """
        try:
            self.marker_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Failed to create config dir %s: %s", self.marker_path.parent, e)
            return False
        try:
            with self.marker_path.open("x"):
                pass
        except FileExistsError:
            return True
        except OSError as e:
            logger.error("Failed to create marker %s: %s", self.marker_path, e)
            return False
        return True
