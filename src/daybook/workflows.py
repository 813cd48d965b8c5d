"""Journal workflow: the sequence behind a single `daybook` invocation."""

import logging
from datetime import datetime
from pathlib import Path

from .adapters.editor_process import SubprocessEditor
from .adapters.file_entry import FileEntryStore
from .config import Config
from .core.entry import format_header, resolve_entry_path
from .errors import MissingEditorError
from .ports import EditorLauncher, EntryStore

logger = logging.getLogger(__name__)


def open_entry(
    config: Config,
    filename: str | None = None,
    now: datetime | None = None,
    store: EntryStore | None = None,
    editor: EditorLauncher | None = None,
) -> Path:
    """Resolve the entry, stamp a header into it, open it in the editor, return its path."""
    if editor is None:
        if not config.editor:
            raise MissingEditorError("EDITOR environment variable is not set")
        editor = SubprocessEditor(config.editor)
    store = store or FileEntryStore()
    now = now or datetime.now().astimezone()

    store.ensure_root(config.journal_dir)

    path = resolve_entry_path(config.journal_dir, filename, now.date())
    logger.debug(f"Resolved entry {path}")

    # The header is always the current time, even for another day's entry.
    store.write_header(path, format_header(now))

    editor.open(path)
    return path
