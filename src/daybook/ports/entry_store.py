"""Entry storage interface."""

from pathlib import Path
from typing import Protocol


class EntryStore(Protocol):
    """Interface for creating and appending to journal entries."""

    def ensure_root(self, journal_dir: Path) -> None:
        """Create the journal directory if it is missing."""
        ...

    def exists(self, path: Path) -> bool:
        """Check if an entry file exists."""
        ...

    def write_header(self, path: Path, header: str) -> None:
        """Append a header to an entry, creating the entry if needed."""
        ...
