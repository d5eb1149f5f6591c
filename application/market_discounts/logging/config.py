"""
Logging configuration for the market discounts engine.
Records go to stderr (stdout carries the run result), with an optional local file copy.
"""
import logging

# Settings
from market_discounts.config.settings import DiscountConfigs
configs = DiscountConfigs()

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig:
    """Logging configuration - stderr first, local file optional"""

    # Core settings
    LOG_LEVEL = configs.LOG_LEVEL
    LOG_TO_FILE = configs.LOG_TO_FILE
    LOG_DIR = configs.LOG_DIR
    LOG_DEBUG_PRINTS = configs.LOG_DEBUG_PRINTS

    # Service identity
    APPLICATION_ENVIRONMENT = configs.APPLICATION_ENVIRONMENT
    SERVICE_NAME = configs.APP_NAME

    @classmethod
    def level(cls) -> int:
        if cls.LOG_LEVEL in VALID_LEVELS:
            return getattr(logging, cls.LOG_LEVEL)
        return logging.INFO

    @classmethod
    def is_valid_config(cls):
        """Validate configuration - only the level name can be wrong"""
        if cls.LOG_LEVEL not in VALID_LEVELS:
            return False, f"Unknown LOG_LEVEL '{cls.LOG_LEVEL}', falling back to INFO"
        return True, "Configuration is valid"
