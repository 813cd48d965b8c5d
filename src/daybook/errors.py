"""Errors raised while opening a journal entry.

Every error is terminal: the CLI prints the message and exits non-zero.
"""


class DaybookError(Exception):
    """Base class for all daybook errors."""


class ConfigError(DaybookError):
    """The environment does not describe a usable journal."""


class EntryPathError(DaybookError):
    """A filename argument cannot be used as a journal entry."""


class OutsideJournalError(EntryPathError):
    """The entry path escapes the journal directory."""


class InvalidExtensionError(EntryPathError):
    """The entry is not a .txt file."""


class InvalidDateNameError(EntryPathError):
    """The entry name is not a YYYY-MM-DD date."""


class MissingEditorError(DaybookError):
    """EDITOR is not set."""


class EditorError(DaybookError):
    """The editor could not be started or exited with an error."""
