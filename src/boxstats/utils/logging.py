"""
Logging utilities for the boxstats library.

boxstats is a headless library of pure functions:

1. Library code never calls configure_logging(), it only uses get_logger(__name__).
2. Applications and scripts MAY call configure_logging() to see boxstats output.
3. When imported by an application with configured logging, boxstats records
   propagate to that application's handlers.

Example Usage
-------------
In library code:
    ```python
    from boxstats.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.debug("quartiles computed")
    ```

In standalone scripts:
    ```python
    from boxstats.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

LOGGER_NAME = "boxstats"
LOG_LEVEL_ENV_VAR = "BOXSTATS_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d:%(funcName)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the boxstats logger only (never root).

    Parameters
    ----------
    level:
        Logging level (e.g. "DEBUG", "INFO"). Defaults to BOXSTATS_LOG_LEVEL
        env var, or "INFO" if unset.
    fmt:
        Log message format. Defaults to DEFAULT_FMT.
    datefmt:
        Date format. Defaults to DEFAULT_DATEFMT.
    force:
        If True, remove existing handlers before adding a new one. If False,
        skip when a stderr handler is already attached.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    formatter = logging.Formatter(
        fmt=fmt or DEFAULT_FMT,
        datefmt=datefmt or DEFAULT_DATEFMT,
    )

    if force:
        for h in logger.handlers[:]:
            h.close()
            logger.removeHandler(h)
    else:
        for h in logger.handlers:
            if isinstance(h, logging.StreamHandler) and h.stream is sys.stderr:
                h.setLevel(level)
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger by name.

    If name is None, returns the package-level 'boxstats' logger.
    """
    return logging.getLogger(name or LOGGER_NAME)
