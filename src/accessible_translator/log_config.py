"""Console logging setup with colored level names."""

import logging
import sys

from colorama import Fore, Style, init

init(autoreset=True)

LOG_FORMAT = "%(asctime)s %(name)s: %(message)s"


class SimpleColoredFormatter(logging.Formatter):
    COLORS = {
        'DEBUG': Fore.BLUE,
        'INFO': Fore.GREEN,
        'WARNING': Fore.YELLOW,
        'ERROR': Fore.RED,
        'CRITICAL': Fore.RED
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelname, Fore.WHITE)
        msg = super().format(record)
        return f"{log_color}[{record.levelname}] {msg}{Style.RESET_ALL}"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger with a single stdout handler.

    Calling it again only updates the level.

    Args:
        level: Level name such as "DEBUG" or "INFO".

    Returns:
        The ``accessible_translator`` logger.
    """
    logger = logging.getLogger("accessible_translator")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(SimpleColoredFormatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
