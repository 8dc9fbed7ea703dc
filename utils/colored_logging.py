"""
Colored console output for Document Library log records.

Log level names are colorized so library events stand out when
listeners and mutations are traced at DEBUG level.
"""

import logging

# ANSI color codes
RESET = "\033[0m"
BOLD = "\033[1m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
BRIGHT_RED = "\033[91m"


class ColoredFormatter(logging.Formatter):
    """
    Formatter that wraps the level name of each record in an ANSI color
    """
    COLORS = {
        'DEBUG': BLUE,
        'INFO': GREEN,
        'WARNING': YELLOW,
        'ERROR': RED,
        'CRITICAL': BOLD + BRIGHT_RED
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{RESET}"
        try:
            return super().format(record)
        finally:
            # Other handlers share the record
            record.levelname = levelname
