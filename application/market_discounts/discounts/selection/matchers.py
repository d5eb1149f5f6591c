from market_discounts.core.constants import LEGACY_COUNTRY_MARKET_NAMES, MarketMatcherName
from market_discounts.dto.configuration import MarketConfig
from .base import MarketMatcher, SelectionContext

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.selection.matchers")


class MarketIdMatcher(MarketMatcher):
    name = MarketMatcherName.MARKET_ID

    def match(self, market: MarketConfig, context: SelectionContext) -> bool:
        return bool(context.market_id) and market.market_id == context.market_id


class CountryCodeMatcher(MarketMatcher):
    name = MarketMatcherName.COUNTRY_CODE

    def match(self, market: MarketConfig, context: SelectionContext) -> bool:
        return bool(context.country_code) and market.country_code == context.country_code


class LegacyCountryNameMatcher(MarketMatcher):
    """Deprecated: matches CA and DE buyers by a substring of the market name.

    Kept only for configurations saved before markets carried a countryCode.
    """

    name = MarketMatcherName.LEGACY_COUNTRY_NAME

    def match(self, market: MarketConfig, context: SelectionContext) -> bool:
        name_fragment = LEGACY_COUNTRY_MARKET_NAMES.get(context.country_code or "")
        if not name_fragment or name_fragment not in market.market_name:
            return False
        logger.warning(
            f"legacy_country_name_match | country={context.country_code} market_name={market.market_name} "
            f"market_id={market.market_id} | deprecated, set countryCode on the market instead"
        )
        return True


class CurrencyMatcher(MarketMatcher):
    name = MarketMatcherName.CURRENCY

    def match(self, market: MarketConfig, context: SelectionContext) -> bool:
        return bool(context.presentment_currency) and market.currency_code == context.presentment_currency


MARKET_MATCHERS = {
    MarketMatcherName.MARKET_ID: MarketIdMatcher,
    MarketMatcherName.COUNTRY_CODE: CountryCodeMatcher,
    MarketMatcherName.LEGACY_COUNTRY_NAME: LegacyCountryNameMatcher,
    MarketMatcherName.CURRENCY: CurrencyMatcher,
}
