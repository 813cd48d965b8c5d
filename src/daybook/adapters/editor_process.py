"""Editor adapter - subprocess wrapper for the user's $EDITOR."""

import logging
import subprocess
from pathlib import Path

from daybook.core.editor import editor_command
from daybook.errors import EditorError, MissingEditorError

logger = logging.getLogger(__name__)


class SubprocessEditor:
    """
    Foreground editor process.

    Implements EditorLauncher protocol. The editor inherits the terminal
    and the call blocks until it exits.
    """

    def __init__(self, editor: str | None):
        if not editor or not editor.strip():
            raise MissingEditorError("EDITOR environment variable is not set")
        self.editor = editor

    def open(self, path: Path) -> None:
        """Open the entry and wait for the editor to exit."""
        cmd = editor_command(self.editor, path)
        logger.debug(f"Launching editor: {cmd}")

        try:
            proc = subprocess.run(cmd)
        except OSError as e:
            raise EditorError(f"Failed to execute {self.editor}: {e}") from e

        # Negative return codes mean the editor was killed by a signal.
        if proc.returncode != 0:
            code = proc.returncode if proc.returncode > 0 else None
            logger.error(f"Editor {self.editor} exited with {proc.returncode}")
            raise EditorError(f"{self.editor} exited with error code: {code}")
