"""Logging setup for the command-line entry point.

Application loggers hand their rendered events to the standard library
``logging`` module; this attaches a stderr handler so statement output
on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(verbose: bool = False) -> None:
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")
    logging.getLogger("theater").setLevel(level)
