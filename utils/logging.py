# --- utils/logging.py ---

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from core.config import LoggingConfig
from utils.colored_logging import ColoredFormatter


def setup_logging(config: Optional[LoggingConfig] = None):
    """Set up logging configuration.

    Args:
        config: Optional logging configuration
    """
    if config is None:
        config = LoggingConfig()

    # Get root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(config.level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if config.console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(config.level)
        if config.colored:
            console_handler.setFormatter(ColoredFormatter(config.format))
        else:
            console_handler.setFormatter(logging.Formatter(config.format))
        root_logger.addHandler(console_handler)

    if config.file_path:
        log_dir = os.path.dirname(config.file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=config.file_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(config.level)
        file_handler.setFormatter(logging.Formatter(config.format))
        root_logger.addHandler(file_handler)

    logging.info(f"Logging initialized with level {config.level}")
    return root_logger
