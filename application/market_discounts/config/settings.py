import os
from dotenv import load_dotenv
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class DiscountConfigs:
    def __init__(self):

        # Environment settings
        self.APPLICATION_ENVIRONMENT = os.getenv("APPLICATION_ENVIRONMENT", "UAT")
        self.APP_NAME = os.getenv("APP_NAME", "market-discounts")

        # Logging settings
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
        self.LOG_TO_FILE = _env_flag("LOG_TO_FILE", "false")
        self.LOG_DIR = os.getenv("LOG_DIR", "logs")
        self.LOG_DEBUG_PRINTS = _env_flag("LOG_DEBUG_PRINTS", "false")

        # Market selection settings
        self.DATE_VALIDITY_ENABLED = _env_flag("DATE_VALIDITY_ENABLED", "true")
        # When false a date-rejected first match ends selection with no market
        self.DATE_REJECTION_FALLTHROUGH = _env_flag("DATE_REJECTION_FALLTHROUGH", "true")
        self.LEGACY_COUNTRY_NAME_MATCH_ENABLED = _env_flag("LEGACY_COUNTRY_NAME_MATCH_ENABLED", "false")

        # Ordered matcher names, e.g. "market_id,country_code,currency"
        market_matchers_str = os.getenv("MARKET_MATCHERS", "market_id,country_code,currency")
        self.MARKET_MATCHERS = [m.strip().lower() for m in market_matchers_str.split(",") if m.strip()]
