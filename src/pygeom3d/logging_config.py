"""logging setup for programs built on pygeom3d

Library modules only create ``logging.getLogger(__name__)`` loggers
below the ``pygeom3d`` namespace and log at DEBUG.  Nothing is shown
until a program, such as ``python -m pygeom3d``, calls
``setup_logging()`` or configures ``logging`` itself.
"""
import logging
import sys
from typing import Optional, TextIO

## name of the package logger every module logger propagates to
LOGGER_NAME = "pygeom3d"

## time, logger name, level and message
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _attach(logger, handler, level, formatter):
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Route pygeom3d log records to ``stream`` (stdout by default) and,
    if ``log_file`` is given, to that file as well.

    Handlers installed by an earlier call are closed and replaced, so
    repeated calls never print a record twice.

    Args:
        level: threshold for the package logger and its handlers
        log_file: optional path of a log file, truncated on open
        stream: optional text stream instead of ``sys.stdout``

    Returns:
        The ``pygeom3d`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    _attach(logger, logging.StreamHandler(stream or sys.stdout), level, formatter)
    if log_file:
        _attach(logger, logging.FileHandler(log_file, mode='w', encoding='utf-8'),
                level, formatter)

    logger.debug("logging to %s%s", "stream" if stream else "stdout",
                 " and {}".format(log_file) if log_file else "")
    return logger
