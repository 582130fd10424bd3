"""Logging configuration for the evaluator."""
import logging
import os
import sys
from typing import Optional

from letlang.config.settings import EvaluatorSettings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
PACKAGE_LOGGER = "letlang"

def setup_logging(settings: EvaluatorSettings, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger from evaluator settings.

    Only the "letlang" logger is touched; the root logger and any handlers
    the host application installed stay as they are. Calling this again
    replaces the handler installed by the previous call.

    Args:
        settings: Settings supplying the logging level.
        log_file: Optional path to log file. If None, logs to stdout.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.log_level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)

    package_logger.info("Logging initialized at %s level", settings.log_level)
    return package_logger
