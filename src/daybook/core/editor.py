"""Editor command construction."""

import shlex
from pathlib import Path

from daybook.errors import EditorError, MissingEditorError

# Extra arguments per editor; vim and nvim open with the cursor at the end of the file.
EDITOR_ARGS: dict[str, list[str]] = {
    "vim": ["-c", "normal Gzz"],
    "nvim": ["-c", "normal Gzz"],
}


def editor_command(editor: str, path: Path) -> list[str]:
    """
    Build the argv used to open an entry.

    EDITOR is split with shell rules so values like "code -w" work. Extra
    arguments are looked up by the executable's basename, and the entry
    path always comes last.
    """
    try:
        argv = shlex.split(editor)
    except ValueError as e:
        raise EditorError(f"Invalid EDITOR value {editor!r}: {e}") from e
    if not argv:
        raise MissingEditorError("EDITOR environment variable is not set")
    extra = EDITOR_ARGS.get(Path(argv[0]).name, [])
    return [*argv, *extra, str(path)]
