"""
Logging utilities for market discounts
"""
import logging

from market_discounts.logging.config import LoggingConfig
from market_discounts.logging.handlers import get_app_handler, get_local_file_handler, dbg
from market_discounts.logging.filters import EvaluationContextFilter

ROOT_LOGGER_NAME = 'market_discounts'

_context_filter = EvaluationContextFilter()


def setup_app_logging(logger_name: str):
    logger = logging.getLogger(logger_name)
    logger.handlers.clear()

    handler = get_app_handler()
    if _context_filter not in handler.filters:
        handler.addFilter(_context_filter)
    logger.addHandler(handler)

    if LoggingConfig.LOG_TO_FILE:
        file_handler = get_local_file_handler(logger_name.replace('.', '_'))
        file_handler.addFilter(_context_filter)
        logger.addHandler(file_handler)

    logger.setLevel(LoggingConfig.level())
    logger.propagate = False
    return logger


essential_app_logger = None


def get_app_logger(name: str | None = None):
    global essential_app_logger
    if name:
        logger = logging.getLogger(name)
        if not logger.handlers:
            setup_app_logging(name)
        return logger
    if essential_app_logger is None:
        essential_app_logger = setup_app_logging(ROOT_LOGGER_NAME)
    return essential_app_logger


def initialize_logging():
    logger = get_app_logger()
    is_valid, message = LoggingConfig.is_valid_config()
    if not is_valid:
        logger.warning(message)
    dbg(f"Logging system initialized level={LoggingConfig.LOG_LEVEL} file={LoggingConfig.LOG_TO_FILE}")
    return logger
