"""
Logging handlers for market discounts.
A shared stderr handler, with a local-file handler per logger when LOG_TO_FILE is on.
"""
import logging
import os
import sys

from market_discounts.logging.config import LoggingConfig
from market_discounts.logging.formatters import AppLogsJSONFormatter


def dbg(msg: str) -> None:
    """Lightweight debug print; enabled when LOG_DEBUG_PRINTS=true"""
    if LoggingConfig.LOG_DEBUG_PRINTS:
        print(msg, file=sys.stderr)


class StderrHandler(logging.StreamHandler):
    """Stream handler that resolves sys.stderr at emit time, so redirected streams are honoured."""

    def __init__(self):
        super().__init__(stream=sys.stderr)

    def emit(self, record):
        self.stream = sys.stderr
        super().emit(record)


_handlers = {}


def get_local_file_handler(name: str = 'app'):
    os.makedirs(LoggingConfig.LOG_DIR, exist_ok=True)
    handler = logging.FileHandler(os.path.join(LoggingConfig.LOG_DIR, f'{name}.log'))
    handler.setFormatter(AppLogsJSONFormatter())
    return handler


def get_app_handler():
    if 'app' not in _handlers:
        handler = StderrHandler()
        handler.setFormatter(AppLogsJSONFormatter())
        _handlers['app'] = handler
        dbg(f"[Handler:app] created stderr handler level={LoggingConfig.LOG_LEVEL}")
    return _handlers['app']
