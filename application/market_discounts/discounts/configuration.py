import json
from typing import Any, List, Optional

from pydantic import ValidationError

# DTOs
from market_discounts.dto.configuration import DiscountConfiguration, MarketConfig

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.configuration")


EMPTY_CONFIGURATION = DiscountConfiguration()


def decode_configuration(configuration_value: Optional[str] = None, metafield_value: Optional[str] = None) -> DiscountConfiguration:
    """Decode the serialized configuration attached to a discount.

    The host has shipped the blob either as `configuration.value` or as
    `metafield.value`; the first non-empty one is used.

    Args:
        configuration_value: `discount.configuration.value`
        metafield_value: `discount.metafield.value`

    Returns:
        DiscountConfiguration; malformed input yields an empty market list
    """
    raw = configuration_value or metafield_value
    if not raw:
        logger.debug("configuration_decode_skipped | reason=no_configuration_value")
        return EMPTY_CONFIGURATION

    try:
        document = json.loads(raw)
    except (TypeError, ValueError, RecursionError) as e:
        logger.warning(f"configuration_decode_failed | reason=invalid_json error={e}")
        return EMPTY_CONFIGURATION

    if not isinstance(document, dict):
        logger.warning(f"configuration_decode_failed | reason=not_an_object type={type(document).__name__}")
        return EMPTY_CONFIGURATION

    title = document.get("title")
    if not isinstance(title, str) or not title:
        title = None

    markets = decode_markets(document.get("markets"))
    logger.info(f"configuration_decoded | markets={len(markets)} title={title}")
    return DiscountConfiguration(markets=markets, title=title)


def decode_markets(raw_markets: Any) -> List[MarketConfig]:
    """Validate market entries one by one; invalid entries are dropped."""
    if not isinstance(raw_markets, list):
        if raw_markets is not None:
            logger.warning(f"configuration_markets_ignored | reason=not_a_list type={type(raw_markets).__name__}")
        return []

    markets = []
    for index, raw_market in enumerate(raw_markets):
        try:
            markets.append(MarketConfig.model_validate(raw_market))
        except ValidationError as e:
            logger.warning(f"configuration_market_skipped | index={index} errors={e.errors(include_url=False)}")
    return markets
