"""Functional core - pure journal logic with no I/O."""

from .entry import entry_filename, format_header, is_entry_date, is_within, resolve_entry_path
from .editor import EDITOR_ARGS, editor_command

__all__ = [
    # Entry
    "entry_filename",
    "format_header",
    "is_entry_date",
    "is_within",
    "resolve_entry_path",
    # Editor
    "EDITOR_ARGS",
    "editor_command",
]
