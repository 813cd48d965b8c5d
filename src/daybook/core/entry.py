"""Pure journal entry logic - no I/O dependencies."""

import os
from datetime import date, datetime
from pathlib import Path

from daybook.errors import (
    InvalidDateNameError,
    InvalidExtensionError,
    OutsideJournalError,
)

ENTRY_SUFFIX = ".txt"
ENTRY_DATE_FORMAT = "%Y-%m-%d"
HEADER_FORMAT = "# %a %b %d %H:%M:%S %Z %Y"


def entry_filename(day: date) -> str:
    """Filename of the entry for a given day (YYYY-MM-DD.txt)."""
    return f"{day.isoformat()}{ENTRY_SUFFIX}"


def format_header(now: datetime) -> str:
    """Header line stamped into an entry on every invocation."""
    if now.tzinfo is None:
        now = now.astimezone()
    return now.strftime(HEADER_FORMAT)


def _normalize(path: Path) -> Path:
    # Lexical only; the filesystem is never consulted.
    return Path(os.path.normpath(path))


def is_within(path: Path, root: Path) -> bool:
    """True if path lies inside root after normalizing both."""
    return _normalize(path).is_relative_to(_normalize(root))


def is_entry_date(stem: str) -> bool:
    try:
        datetime.strptime(stem, ENTRY_DATE_FORMAT)
    except ValueError:
        return False
    return True


def resolve_entry_path(journal_root: Path, filename: str | None, today: date) -> Path:
    """
    Resolve the entry file to open.

    With no filename the entry is today's. Otherwise the filename may be
    relative to the journal root or absolute, but must stay inside the
    root, end in .txt and be named after a YYYY-MM-DD date. The returned
    path is not normalized and may not exist yet.
    """
    journal_root = Path(journal_root)

    if filename is None:
        return journal_root / entry_filename(today)

    path = Path(filename)
    resolved = path if path.is_absolute() else journal_root / path

    if not is_within(resolved, journal_root):
        raise OutsideJournalError("Entry must be within the journal directory")

    if resolved.suffix != ENTRY_SUFFIX:
        raise InvalidExtensionError("Entry must be a plain text file")

    if not is_entry_date(resolved.stem):
        raise InvalidDateNameError(
            "Entry filename must conform to the following format: YYYY-MM-DD"
        )

    return resolved
