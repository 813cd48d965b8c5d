"""Daybook CLI - open today's journal entry in $EDITOR."""

import logging
import sys

import click

from . import __version__
from .config import load_config
from .errors import DaybookError
from .workflows import open_entry

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.argument("filenames", nargs=-1, metavar="[FILENAME]")
def main(debug: bool, filenames: tuple[str, ...]):
    """Open a journal entry in $EDITOR.

    FILENAME defaults to today's entry. Otherwise it must be a
    YYYY-MM-DD.txt file inside the journal directory ($JOURNAL_DIR,
    default ~/.local/share/journal).
    """
    if len(filenames) > 1:
        click.echo("Error: Too many arguments. Aborting", err=True)
        sys.exit(1)

    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )

    filename = filenames[0] if filenames else None

    try:
        config = load_config()
        open_entry(config, filename)
    except (DaybookError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
