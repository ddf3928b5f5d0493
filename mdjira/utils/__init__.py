"""Logging helpers shared by the converter and the command line."""

import sys

import click

from .. import defaults

_VERBOSE = {"enabled": False}


def log(message, level="INFO", verbose_only=False, verbose=False, file=sys.stdout):
    """
    Log a message with color-coded level prefix.

    Args:
        message (str): The message to log.
        level (str): The log level (e.g., INFO, WARNING, ERROR).
        verbose_only (bool): Only log if verbose mode is enabled.
        verbose (bool): Whether verbose mode is enabled.
        file (file): The file to write to.
    """
    if verbose_only and not verbose:
        return

    color = defaults.LOG_LEVELS.get(level, "reset")
    prefix = f"[{level}] " if level else ""

    if file == sys.stderr:
        click.secho(f"{prefix}{message}", fg=color.lower(), err=True)
    else:
        click.secho(f"{prefix}{message}", fg=color.lower())


def set_verbose(enabled=True):
    _VERBOSE["enabled"] = enabled


def is_verbose():
    return _VERBOSE["enabled"]


def debug(message):
    """Default debug sink: silent until verbose mode is switched on."""
    log(
        message,
        level="DEBUG",
        verbose_only=True,
        verbose=_VERBOSE["enabled"],
        file=sys.stderr,
    )
