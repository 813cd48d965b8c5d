"""Daybook - one plain text journal file per day."""

import logging

__version__ = "0.1.0"

# Silent unless the CLI's --debug configures a handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())
