"""Diagnostic logging for capkit.

The doctor report itself is written with ``click.echo``.  Loggers carry the
background detail that explains a surprising report: which ``npm`` queries
ran and what they returned, which ``package.json`` files were found, and
which platform checks were skipped.

Environment:
    CAPKIT_LOG_LEVEL    DEBUG, INFO, WARNING (default), ERROR or CRITICAL
    CAPKIT_LOG_VERBOSE  "1" adds timestamps and source locations

Usage:
    from capkit._logging import get_logger
    logger = get_logger(__name__)
    logger.debug("latest %s -> %s", name, version)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

_NAMESPACE = "capkit"

_FORMATS = {
    False: "[capkit] %(levelname)s %(name)s: %(message)s",
    True: "[capkit %(asctime)s] %(levelname)s %(name)s (%(filename)s:%(lineno)d): %(message)s",
}

_installed = False


def _level_from_env() -> int:
    name = os.environ.get("CAPKIT_LOG_LEVEL", "").strip().upper()
    return getattr(logging, name, logging.WARNING)


def _install_handler() -> logging.Logger:
    """Attach a stderr handler to the ``capkit`` logger on first use.

    Existing handlers (pytest's caplog, an application's own setup) are
    left in place and no second handler is added.
    """
    global _installed  # noqa: PLW0603
    base = logging.getLogger(_NAMESPACE)
    if _installed:
        return base

    base.setLevel(_level_from_env())
    if not base.handlers:
        verbose = os.environ.get("CAPKIT_LOG_VERBOSE", "0").strip() == "1"
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMATS[verbose]))
        base.addHandler(handler)

    _installed = True
    return base


def get_logger(name: str) -> logging.Logger:
    """Return the logger for module *name* (pass ``__name__``)."""
    _install_handler()
    return logging.getLogger(name)


def set_log_level(level: Optional[str] = None) -> None:
    """Override the log level for the rest of the process.

    ``None`` goes back to whatever ``CAPKIT_LOG_LEVEL`` says.  Unknown
    names fall back to WARNING.
    """
    base = _install_handler()
    if level is None:
        base.setLevel(_level_from_env())
    else:
        base.setLevel(getattr(logging, level.upper(), logging.WARNING))
