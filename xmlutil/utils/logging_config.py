#!/usr/bin/env python3
"""
Logging setup for applications embedding xmlutil.

The package itself only creates module loggers under the ``xmlutil``
namespace and never configures them; an application calls
:func:`setup_logging` once at startup to route those records.
"""

import logging
import sys
from typing import Optional

from ..config import LOGGER_NAME, LOG_FORMAT, LOG_DATE_FORMAT, LOG_LEVEL


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(debug: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route xmlutil records to stdout and, optionally, a file.

    Parse and serialize faults arrive at ERROR. Missing tags arrive at
    DEBUG and reach the console only with ``debug`` set; the log file
    always gets them.

    Args:
        debug: Lower the console threshold to DEBUG.
        log_file: Path of a file that receives every record.

    Returns:
        The ``xmlutil`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    # Re-init replaces handlers rather than stacking them
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(sys.stdout), logging.DEBUG if debug else LOG_LEVEL)

    if log_file:
        try:
            _attach(logger, logging.FileHandler(str(log_file), encoding='utf-8'), logging.DEBUG)
        except OSError as e:
            logger.warning("Could not open log file %s: %s", log_file, e)

    return logger
