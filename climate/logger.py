"""
This file configures the logger for the application.

Diagnostics go to stderr so stdout only carries the report.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter to add colors to log messages based on their level.
    """

    COLORS = {
        "DEBUG": "\033[0;96m",  # Cyan
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def format(self, record):
        """
        Format the log record with appropriate color coding.

        Args:
            record: The log record to format.

        Returns:
            str: The formatted log message with color codes applied.
        """
        log_color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False, stream=None) -> None:
    """
    Configures the root logger. Colors are only used when the stream is a terminal.

    Args:
        debug (bool, optional): If True, sets logging level to DEBUG;
                               otherwise sets it to INFO. Defaults to False.
        stream (optional): Stream to write to. Defaults to sys.stderr.
    """
    stream = stream if stream is not None else sys.stderr
    logger = logging.getLogger()

    # Remove any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        handler.setFormatter(ColoredFormatter(fmt))
    else:
        handler.setFormatter(logging.Formatter(fmt))

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)
