"""
Module: logging_utils

Logging setup shared by every testgrid_config module. Adds a TRACE level
below DEBUG, configures the root logger from the ``LOG_LEVEL`` environment
variable, and hands out named loggers.

Functions:
    - trace(self, message, *args, **kwargs):
      Logs a message with the custom TRACE level.
    - get_log_level(level_name):
      Maps a level name (including "TRACE") to its numeric value.
    - get_logger(name: str):
      Retrieves a logger instance configured with the specified name.

Example:
    from testgrid_config.utils.logging_utils import get_logger

    LOGGER = get_logger(__name__)
    LOGGER.trace("Checking dashboard tabs")
"""

import logging
import os

# Define a custom TRACE level
TRACE = 5

logging.addLevelName(TRACE, "TRACE")


def trace(self, message, *args, **kwargs):
    """
    Logs a message with TRACE level if the TRACE level is enabled for this logger.

    :param self: The logger handling the log dispatch.
    :param message: The log message to be processed and logged.
    :param args: Positional arguments to format the message, if needed.
    :param kwargs: Keyword arguments passed through to ``Logger._log``.
    :return: None
    """
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)


logging.Logger.trace = trace


def get_log_level(level_name):
    """
    Returns the numeric logging level for ``level_name``.

    "TRACE" maps to the custom TRACE level; any name that is not a standard
    ``logging`` level falls back to ``logging.INFO``.

    :param level_name: Name of the logging level, e.g. "TRACE", "DEBUG", "INFO".
    :type level_name: str
    :return: The corresponding numeric logging level.
    :rtype: int
    """
    if level_name == "TRACE":
        return TRACE
    level = getattr(logging, level_name, logging.INFO)
    return level if isinstance(level, int) else logging.INFO


log_level_str = os.getenv("LOG_LEVEL", "INFO").upper()
log_level = get_log_level(log_level_str)

# Configure the root logger once, unless a host application already did
if len(logging.getLogger().handlers) == 0:
    logging.basicConfig(level=log_level)


def get_logger(name: str):
    """
    Retrieve a logger instance configured with the specified name.

    :param name: Logger name, usually ``__name__`` of the calling module.
    :type name: str
    :return: The ``logging.Logger`` for ``name``.
    :rtype: logging.Logger
    """
    return logging.getLogger(name)
