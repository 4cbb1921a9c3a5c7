"""Logging setup shared by the parser and the command line.

``configure_logging`` maps the ``--verbose``/``--quiet`` flags to a level on
the root logger. It only installs a handler when none exists, so calling it
again (for instance once per ``CliRunner`` invocation in tests) just adjusts
the level.
"""

from __future__ import annotations

import logging

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(*, verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG

    if quiet:
        return logging.ERROR

    return logging.INFO


def configure_logging(
    *, verbose: bool = False, quiet: bool = False, fmt: str | None = None
) -> int:
    """Configure the root logger and return the level that was applied."""

    level = resolve_level(verbose=verbose, quiet=quiet)
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(level=level, format=fmt or DEFAULT_LOG_FORMAT)
    else:
        root.setLevel(level)

    return level


def get_logger(name: str) -> logging.Logger:
    """Return a module-scoped logger."""

    return logging.getLogger(name)
