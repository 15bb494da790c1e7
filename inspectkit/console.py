"""
Console writers for diagnostic output.

Thin wrappers around sys.stdout and sys.stderr, resolved on every call so that
redirected streams are honored.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys

from datetime import datetime
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .deprecation import _deprecation_warning
from .inspector import inspect

# Constants ------------------------------------------------------------------------------------------------------------

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


# Methods --------------------------------------------------------------------------------------------------------------

def print_(*args: Any) -> None:
    """Write each argument to stdout, without separators or a trailing newline."""
    for arg in args:
        sys.stdout.write(str(arg))


def puts(*args: Any) -> None:
    """Write each argument to stdout on its own line."""
    for arg in args:
        sys.stdout.write(f"{arg}\n")


def debug(x: Any) -> None:
    sys.stderr.write(f"DEBUG: {x}\n")


def error(*args: Any) -> None:
    """Write each argument to stderr on its own line."""
    for arg in args:
        sys.stderr.write(f"{arg}\n")


def p(*args: Any) -> None:
    """
    Write the inspect() rendering of each argument to stderr on its own line.

    Deprecated: use ``error(inspect(x))`` or ``puts(inspect(x))`` instead.
    """
    _deprecation_warning("console", "p() will be removed in future versions. Use puts(inspect()) instead.")
    for arg in args:
        error(inspect(arg))


def timestamp(now: datetime | None = None) -> str:
    """
    Format a moment as '<day> <Mon> HH:MM:SS', e.g. '26 Feb 16:19:34'.

    Args:
        now: Moment to format; local current time if None.
    """
    now = datetime.now() if now is None else now
    return f"{now.day} {MONTHS[now.month - 1]} {now:%H:%M:%S}"


def log(msg: Any) -> None:
    """Write a timestamped line to stdout, e.g. '26 Feb 16:19:34 - started'."""
    puts(f"{timestamp()} - {msg}")
