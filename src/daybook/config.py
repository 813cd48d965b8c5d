"""Configuration management for Daybook.

Daybook has no configuration file; everything comes from the environment.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .errors import ConfigError

logger = logging.getLogger(__name__)

JOURNAL_DIR_ENV = "JOURNAL_DIR"
EDITOR_ENV = "EDITOR"
DEFAULT_JOURNAL_PATH = Path(".local") / "share" / "journal"


@dataclass
class Config:
    """Daybook configuration."""

    journal_dir: Path
    editor: str | None = None


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigError("Could not determine home directory") from e


def load_config(environ: Mapping[str, str] | None = None, home: Path | None = None) -> Config:
    """
    Load configuration from environment variables.

    JOURNAL_DIR overrides the journal directory (~ is expanded), otherwise
    it defaults to ~/.local/share/journal. EDITOR is read as-is; a missing
    editor is reported when one is needed, not here.
    """
    if environ is None:
        environ = os.environ

    journal_dir_value = environ.get(JOURNAL_DIR_ENV)
    if journal_dir_value:
        try:
            journal_dir = Path(journal_dir_value).expanduser()
        except RuntimeError as e:
            raise ConfigError("Could not determine home directory") from e
    else:
        journal_dir = (home or _home_dir()) / DEFAULT_JOURNAL_PATH

    logger.debug(f"Journal directory: {journal_dir}")
    return Config(journal_dir=journal_dir, editor=environ.get(EDITOR_ENV) or None)
