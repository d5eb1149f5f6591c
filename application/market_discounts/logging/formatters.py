"""
JSON Formatters for market discounts logging
"""
import json
import logging
from datetime import datetime

from market_discounts.logging.config import LoggingConfig


class BaseJSONFormatter(logging.Formatter):
    """Basic JSON formatter"""

    def __init__(self):
        super().__init__()
        self.application_environment = LoggingConfig.APPLICATION_ENVIRONMENT
        self.service_name = LoggingConfig.SERVICE_NAME

    def format(self, record):
        """Convert log record to JSON format"""
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line_number': record.lineno,
            'environment': self.application_environment,
            'service': self.service_name
        }

        # Add exception if present
        if record.exc_info:
            log_entry['exception'] = str(record.exc_info[1])

        self.add_extra_fields(log_entry, record)

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def add_extra_fields(self, log_entry, record):
        pass


class AppLogsJSONFormatter(BaseJSONFormatter):
    def add_extra_fields(self, log_entry, record):
        log_entry['evaluation_id'] = getattr(record, 'evaluation_id', '')
        log_entry['resolver'] = getattr(record, 'resolver', '')
        log_entry['market_id'] = getattr(record, 'market_id', '')
        log_entry['discount_code'] = getattr(record, 'discount_code', '')
