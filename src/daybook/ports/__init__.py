"""Ports - interfaces/protocols for external dependencies."""

from .entry_store import EntryStore
from .editor import EditorLauncher

__all__ = [
    "EntryStore",
    "EditorLauncher",
]
