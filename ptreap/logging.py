"""Project-wide logging utilities that honour `RuntimeConfig`."""

from __future__ import annotations

import logging
from typing import Optional

from . import config as pt_config

_ROOT_LOGGER = "ptreap"


def _qualified_name(name: Optional[str]) -> str:
    if not name or name == _ROOT_LOGGER:
        return _ROOT_LOGGER
    if name.startswith(f"{_ROOT_LOGGER}."):
        return name
    return f"{_ROOT_LOGGER}.{name}"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a child of the ``ptreap`` logger at the configured level.

    `name` may be a short component name (``"cli.bench"``) or a module's
    ``__name__``; names already under ``ptreap.`` are used as given, so
    ``get_logger(__name__)`` inside the package does not double the prefix.
    """

    runtime = pt_config.runtime_config()
    logger = logging.getLogger(_qualified_name(name))
    logger.setLevel(runtime.log_level)
    return logger
