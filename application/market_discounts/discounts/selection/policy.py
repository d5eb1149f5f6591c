from datetime import date
from typing import List, Optional, Sequence

# Constants
from market_discounts.core.constants import MarketMatcherName
from market_discounts.core.exceptions import InvalidSettingsError

# Settings
from market_discounts.config.settings import DiscountConfigs

# DTOs
from market_discounts.dto.configuration import MarketConfig

# Utils
from market_discounts.utils.datetime_helpers import is_within_date_range

from .base import MarketMatcher, SelectionContext
from .matchers import MARKET_MATCHERS

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.selection.policy")


class DateValidityPolicy:
    """Checks a market's inclusive start/end dates against the shop's local date."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def is_valid(self, market: MarketConfig, today: Optional[date]) -> bool:
        if not self.enabled:
            return True
        return is_within_date_range(market.start_date, market.end_date, today)


class MarketSelectionPolicy:
    """Ordered matchers tried in sequence; the first active, date-valid match wins."""

    def __init__(self, matchers: Sequence[MarketMatcher], date_policy: Optional[DateValidityPolicy] = None, date_rejection_fallthrough: bool = True):
        """Initialize the selection policy.
        Args:
            matchers: matchers in precedence order
            date_policy: date check applied to every matched market
            date_rejection_fallthrough: if False, a date-rejected first match ends selection
        """
        self.matchers = tuple(matchers)
        self.date_policy = date_policy or DateValidityPolicy()
        self.date_rejection_fallthrough = date_rejection_fallthrough

    @property
    def matcher_names(self) -> List[str]:
        return [matcher.name for matcher in self.matchers]

    @classmethod
    def from_settings(cls, configs: Optional[DiscountConfigs] = None) -> "MarketSelectionPolicy":
        configs = configs or DiscountConfigs()
        names = list(configs.MARKET_MATCHERS) or list(MarketMatcherName.DEFAULT_ORDER)

        unknown = [name for name in names if name not in MARKET_MATCHERS]
        if unknown:
            raise InvalidSettingsError(
                f"Unknown market matcher(s): {', '.join(unknown)}",
                errors=[{"field": "MARKET_MATCHERS", "unknown": unknown, "allowed": sorted(MARKET_MATCHERS)}],
            )

        if configs.LEGACY_COUNTRY_NAME_MATCH_ENABLED and MarketMatcherName.LEGACY_COUNTRY_NAME not in names:
            names.insert(cls._legacy_position(names), MarketMatcherName.LEGACY_COUNTRY_NAME)

        matchers = [MARKET_MATCHERS[name]() for name in names]
        logger.debug(f"market_selection_policy | matchers={names} date_validity={configs.DATE_VALIDITY_ENABLED} fallthrough={configs.DATE_REJECTION_FALLTHROUGH}")
        return cls(
            matchers,
            date_policy=DateValidityPolicy(enabled=configs.DATE_VALIDITY_ENABLED),
            date_rejection_fallthrough=configs.DATE_REJECTION_FALLTHROUGH,
        )

    @staticmethod
    def _legacy_position(names: List[str]) -> int:
        # right after the country code matcher, else right after the market id matcher
        for anchor in (MarketMatcherName.COUNTRY_CODE, MarketMatcherName.MARKET_ID):
            if anchor in names:
                return names.index(anchor) + 1
        return 0

    def select(self, markets: Sequence[MarketConfig], context: SelectionContext) -> Optional[MarketConfig]:
        """Pick at most one market.

        Args:
            markets: decoded market entries in configuration order
            context: localization, currency and shop date signals

        Returns:
            Selected MarketConfig, or None when nothing applies
        """
        for matcher in self.matchers:
            for market in markets:
                if not market.active or not matcher.match(market, context):
                    continue

                if self.date_policy.is_valid(market, context.shop_date):
                    logger.info(f"market_selected | matcher={matcher.name} market_id={market.market_id} market_name={market.market_name}")
                    return market

                logger.info(
                    f"market_date_rejected | matcher={matcher.name} market_id={market.market_id} "
                    f"start={market.start_date} end={market.end_date} shop_date={context.shop_date}"
                )
                if not self.date_rejection_fallthrough:
                    return None

        logger.info(f"market_not_selected | market_id={context.market_id} country={context.country_code} currency={context.presentment_currency}")
        return None
