"""Mini README: Application-wide logging helpers for Home Ledger.

Structure:
    * level_for_environment - maps the settings' environment label to a level.
    * configure_root_logger - installs the single stream handler.
    * get_logger - module logger factory used as ``LOGGER = get_logger(__name__)``.

The first call installs the handler at INFO unless a level is given; the
launcher later raises or lowers it from the configured environment. Reloading
modules never adds a second handler.
"""

from __future__ import annotations

import logging
from typing import Optional

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
_ENVIRONMENT_LEVELS = {"development": logging.DEBUG, "test": logging.WARNING}
_LOGGER_INITIALISED = False


def level_for_environment(environment: str) -> int:
    """DEBUG while developing, WARNING under test, INFO everywhere else."""

    return _ENVIRONMENT_LEVELS.get(environment.strip().lower(), logging.INFO)


def configure_root_logger(level: Optional[int] = None) -> None:
    """Attach a timestamped stream handler to the root logger once.

    Later calls only adjust the level, and only when one is given.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_root_logger()
    return logging.getLogger(name)
