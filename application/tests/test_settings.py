from market_discounts.config.settings import DiscountConfigs


def test_defaults():
    configs = DiscountConfigs()

    assert configs.DATE_VALIDITY_ENABLED is True
    assert configs.DATE_REJECTION_FALLTHROUGH is True
    assert configs.LEGACY_COUNTRY_NAME_MATCH_ENABLED is False
    assert configs.MARKET_MATCHERS == ["market_id", "country_code", "currency"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATE_VALIDITY_ENABLED", "FALSE")
    monkeypatch.setenv("LEGACY_COUNTRY_NAME_MATCH_ENABLED", "True")
    monkeypatch.setenv("MARKET_MATCHERS", " Market_ID , ,currency ")

    configs = DiscountConfigs()

    assert configs.DATE_VALIDITY_ENABLED is False
    assert configs.LEGACY_COUNTRY_NAME_MATCH_ENABLED is True
    assert configs.MARKET_MATCHERS == ["market_id", "currency"]
