import json

import pytest

from market_discounts.config.settings import DiscountConfigs
from market_discounts.discounts.engine import DiscountEngine

CANADA_MARKET_ID = "gid://shopify/Market/103251444094"
GERMANY_MARKET_ID = "gid://shopify/Market/103251411326"
FIRST_LINE_ID = "gid://shopify/CartLine/0"

SETTINGS_ENV_KEYS = [
    "DATE_VALIDITY_ENABLED",
    "DATE_REJECTION_FALLTHROUGH",
    "LEGACY_COUNTRY_NAME_MATCH_ENABLED",
    "MARKET_MATCHERS",
]


@pytest.fixture(autouse=True)
def clear_discount_env(monkeypatch):
    for key in SETTINGS_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def engine():
    return DiscountEngine(DiscountConfigs())


@pytest.fixture
def make_market():
    """Flat market entry as the admin app stores it; Canada fixed 10 per line by default."""

    def _make(**overrides):
        entry = {
            "marketId": CANADA_MARKET_ID,
            "marketName": "Canada",
            "currencyCode": "CAD",
            "countryCode": "CA",
            "cartLineType": "fixed",
            "cartLinePercentage": "0",
            "cartLineFixed": "10",
            "orderType": "percentage",
            "orderPercentage": "0",
            "orderFixed": "0",
            "deliveryType": "percentage",
            "deliveryPercentage": "0",
            "deliveryFixed": "0",
            "active": True,
            "excludeOnSale": False,
            "startDate": "2025-06-17",
            "endDate": None,
        }
        entry.update(overrides)
        return entry

    return _make


@pytest.fixture
def germany_market(make_market):
    return make_market(
        marketId=GERMANY_MARKET_ID,
        marketName="Germany",
        currencyCode="EUR",
        countryCode="DE",
        cartLineFixed="5",
    )


def _discount(classes, markets, title, config_key):
    document = {"collectionIds": [], "markets": markets}
    if title is not None:
        document["title"] = title
    return {"discountClasses": list(classes), config_key: {"value": json.dumps(document)}}


def _localization(market_id, country):
    localization = {}
    if market_id is not None:
        localization["market"] = {"id": market_id}
    if country is not None:
        localization["country"] = {"isoCode": country}
    return localization


@pytest.fixture
def make_cart_lines_input():
    def _make(markets, classes=("PRODUCT",), lines=None, market_id=CANADA_MARKET_ID, country="CA",
              currency="CAD", shop_date="2025-06-18", title=None, code=None, config_key="configuration"):
        if lines is None:
            lines = [{"id": FIRST_LINE_ID, "cost": {"subtotalAmount": {"amount": "1914.0"}}}]
        payload = {
            "cart": {
                "lines": lines,
                "buyerIdentity": {"presentmentCurrencyCode": currency},
            },
            "discount": _discount(classes, markets, title, config_key),
            "localization": _localization(market_id, country),
            "shop": {"localTime": {"date": shop_date}},
        }
        if code is not None:
            payload["triggeringDiscountCode"] = code
        return payload

    return _make


@pytest.fixture
def make_delivery_input():
    def _make(markets, classes=("SHIPPING",), groups=None, market_id=CANADA_MARKET_ID, country="CA",
              shop_date="2025-06-18", title=None, code=None, config_key="metafield"):
        if groups is None:
            groups = [{
                "id": "gid://shopify/CartDeliveryGroup/0",
                "deliveryOptions": [
                    {"handle": "standard", "cost": {"currencyCode": "CAD", "amount": "12.00"}},
                    {"handle": "express", "cost": {"currencyCode": "CAD", "amount": "25.00"}},
                ],
            }]
        payload = {
            "cart": {"lines": [], "deliveryGroups": groups},
            "discount": _discount(classes, markets, title, config_key),
            "localization": _localization(market_id, country),
            "shop": {"localTime": {"date": shop_date}},
        }
        if code is not None:
            payload["triggeringDiscountCode"] = code
        return payload

    return _make
