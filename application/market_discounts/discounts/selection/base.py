from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Optional

from market_discounts.dto.configuration import MarketConfig
from market_discounts.dto.run_input import RunInput
from market_discounts.utils.datetime_helpers import parse_calendar_date


@dataclass(frozen=True)
class SelectionContext:
    """Signals the matchers and the date policy look at."""

    market_id: Optional[str] = None
    country_code: Optional[str] = None
    presentment_currency: Optional[str] = None
    shop_date: Optional[date] = None

    @classmethod
    def from_run_input(cls, run_input: RunInput) -> "SelectionContext":
        return cls(
            market_id=run_input.market_id,
            country_code=run_input.country_code,
            presentment_currency=run_input.cart.presentment_currency,
            shop_date=parse_calendar_date(run_input.shop_date),
        )


class MarketMatcher(ABC):
    name: str = ""

    @abstractmethod
    def match(self, market: MarketConfig, context: SelectionContext) -> bool:
        pass
