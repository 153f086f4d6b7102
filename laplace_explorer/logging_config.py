"""
Logging Configuration
Sets up the package logger for the explorer.
"""
import logging
import sys
from typing import Optional, Union

from laplace_explorer import config


def setup_logging(level: Union[int, str] = config.LOG_LEVEL, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'laplace_explorer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO")
        log_file: Optional path to save logs to a file.
    """
    logger = logging.getLogger("laplace_explorer")
    logger.setLevel(level)

    # Streamlit reruns the script on every interaction
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
