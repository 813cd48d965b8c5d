"""File-based journal entry adapter."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileEntryStore:
    """
    File-based entry storage.

    Implements EntryStore protocol. Each entry is a plain UTF-8 text file;
    its content is never read back, only extended with header lines.
    """

    encoding = "utf-8"

    def ensure_root(self, journal_dir: Path) -> None:
        """Create the journal directory and its parents."""
        Path(journal_dir).mkdir(parents=True, exist_ok=True)

    def exists(self, path: Path) -> bool:
        """Check if an entry file exists."""
        return Path(path).exists()

    def create(self, path: Path, header: str) -> None:
        """Start a new entry with a single header line and two blank lines."""
        logger.debug(f"Creating entry {path}")
        with open(path, "w", encoding=self.encoding) as f:
            f.write(f"{header}\n\n\n")

    def append(self, path: Path, header: str) -> None:
        """Add a blank line and a new header to an existing entry."""
        logger.debug(f"Appending to entry {path}")
        with open(path, "a", encoding=self.encoding) as f:
            f.write(f"\n{header}\n\n\n")

    def write_header(self, path: Path, header: str) -> None:
        """Append to the entry if it exists, otherwise create it."""
        if self.exists(path):
            self.append(path, header)
        else:
            self.create(path, header)
