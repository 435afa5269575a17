# Copyright (c) 2007-2009 PediaPress GmbH
# See README.rst for additional licensing information.

import logging
import sys

# library use: stay silent unless the application configures logging
_exprlib_root_logger = logging.getLogger("exprlib")
if not _exprlib_root_logger.handlers:
    _exprlib_root_logger.addHandler(logging.NullHandler())


class Stderr:
    """late-bound sys.stderr"""

    def write(self, msg):
        sys.stderr.write(msg)

    def flush(self):
        sys.stderr.flush()


CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
_logging_configured_by_tool = False


def _as_level(level):
    if isinstance(level, str):
        level_value = logging.getLevelName(level.upper())
        if not isinstance(level_value, int):
            _exprlib_root_logger.warning(
                "Invalid exprlib log level %r provided. Defaulting to WARNING.", level
            )
            return logging.WARNING
        return level_value
    return level


def setup_console_logging(level=logging.WARNING, stream=None, log_format=CONSOLE_LOG_FORMAT):
    """
    Configures logging for exprlib command-line tools.

    Sets up a StreamHandler for the 'exprlib' package logger. Calling it
    again only adjusts the level.

    Args:
        level: The minimum logging level for the 'exprlib' logger, as int
            or level name.
        stream: The output stream (default: a late-bound sys.stderr).
        log_format: The format string for log messages.
    """
    global _logging_configured_by_tool

    level = _as_level(level)
    package_logger = _exprlib_root_logger
    package_logger.setLevel(level)

    if _logging_configured_by_tool:
        for handler in package_logger.handlers:
            handler.setLevel(level)
        package_logger.debug("Console logging already configured by tool. Level adjusted.")
        return

    if stream is None:
        stream = Stderr()

    for handler in package_logger.handlers[:]:
        if isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(console_handler)

    # avoid duplicate messages if the application also configures root
    package_logger.propagate = False

    _logging_configured_by_tool = True
    package_logger.debug(
        f"exprlib console logging configured by tool to level {logging.getLevelName(level)}."
    )


def reset_console_logging():
    """undo setup_console_logging, restoring library defaults"""
    global _logging_configured_by_tool

    package_logger = _exprlib_root_logger
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
    package_logger.addHandler(logging.NullHandler())
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
    _logging_configured_by_tool = False
