"""
Core constants for the market discounts engine

This module contains the constants shared by the resolvers, including
discount classes, selection strategies, value types and error codes.
"""


class DiscountClass:
    """Discount classes a discount may declare"""

    PRODUCT = "PRODUCT"
    ORDER = "ORDER"
    SHIPPING = "SHIPPING"


class SelectionStrategy:
    """How the host applies the candidates of one operation"""

    ALL = "ALL"
    FIRST = "FIRST"


class ValueType:
    """Value slot types stored in a market configuration"""

    PERCENTAGE = "percentage"
    FIXED = "fixed"


class ValueSlotName:
    """Value slots of a market configuration and their flat wire prefixes"""

    CART_LINE = "cartLine"
    ORDER = "order"
    DELIVERY = "delivery"


class DiscountTargetLabel:
    """Suffixes used in synthesized candidate messages"""

    PRODUCT = "OFF PRODUCT"
    ORDER = "OFF ORDER"
    DELIVERY = "OFF DELIVERY"


class AmountPrecision:
    """Fraction digits used when rendering fixed amounts"""

    CART_LINE = 1
    ORDER = 1
    DELIVERY = 2


class MarketMatcherName:
    """Names accepted in the MARKET_MATCHERS setting"""

    MARKET_ID = "market_id"
    COUNTRY_CODE = "country_code"
    LEGACY_COUNTRY_NAME = "legacy_country_name"
    CURRENCY = "currency"

    DEFAULT_ORDER = (MARKET_ID, COUNTRY_CODE, CURRENCY)


# Deprecated country code to market name substring mapping
LEGACY_COUNTRY_MARKET_NAMES = {
    "CA": "Canada",
    "DE": "Germany",
}


class ResolverName:
    CART_LINES = "cart_lines"
    DELIVERY_OPTIONS = "delivery_options"


class DiscountErrorCode:
    """Error codes carried by engine exceptions"""

    INVALID_INPUT = "INVALID_INPUT"
    MISSING_DELIVERY_GROUPS = "MISSING_DELIVERY_GROUPS"
    INVALID_SETTINGS = "INVALID_SETTINGS"
    INTERNAL_ERROR = "INTERNAL_ERROR"
