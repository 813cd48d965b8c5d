"""Editor interface."""

from pathlib import Path
from typing import Protocol


class EditorLauncher(Protocol):
    """Interface for opening an entry in a text editor."""

    def open(self, path: Path) -> None:
        """Open the entry and block until the editor exits."""
        ...
