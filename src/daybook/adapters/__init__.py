"""Adapters - I/O implementations of ports."""

from .file_entry import FileEntryStore
from .editor_process import SubprocessEditor

__all__ = [
    "FileEntryStore",
    "SubprocessEditor",
]
