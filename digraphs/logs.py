"""Logging configuration."""

import logging
from logging import Formatter, LogRecord, StreamHandler
from typing import Dict, TextIO


class ColorFormatter(Formatter):

    """Log formatter that prints bold, colorized level names."""

    COLORS = {
        logging.FATAL: 31,  # red
        logging.ERROR: 31,  # red
        logging.WARNING: 33,  # yellow
        logging.INFO: 32,  # green
        logging.DEBUG: 35,  # magenta
    }

    FORMAT = "%(name)s: %(message)s"

    def __init__(self, use_color: bool):  # pylint: disable=super-init-not-called
        self.default = Formatter(f"%(levelname)s: {self.FORMAT}")
        self.formatters: Dict[int, Formatter] = {}
        if use_color:
            for level in self.COLORS:
                code = self.COLORS[level]
                fmt = f"\x1b[{code};1m%(levelname)s:\x1b[0m {self.FORMAT}"
                self.formatters[level] = Formatter(fmt)

    def format(self, record: LogRecord) -> str:
        formatter = self.formatters.get(record.levelno, self.default)
        return formatter.format(record)


def setup_logging(stream: TextIO, log_level: int = logging.WARNING) -> StreamHandler:
    """Set up the root logger to print to stream.

    Uses color if the stream is a TTY. Returns the installed handler so that
    callers can remove it again.
    """
    logger = logging.getLogger()
    logger.setLevel(log_level)
    handler = StreamHandler(stream)
    handler.setFormatter(ColorFormatter(use_color=stream.isatty()))
    logger.addHandler(handler)
    # FATAL and CRITICAL are the same. I prefer the label FATAL.
    logging.addLevelName(logging.FATAL, "FATAL")
    return handler
