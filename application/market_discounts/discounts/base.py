from abc import ABC, abstractmethod
from typing import Optional, Tuple

# DTOs
from market_discounts.dto.configuration import DiscountConfiguration, MarketConfig
from market_discounts.dto.operations import RunResult
from market_discounts.dto.run_input import RunInput

# Context
from market_discounts.context.evaluation_context import evaluation_context

from market_discounts.discounts.configuration import decode_configuration
from market_discounts.discounts.selection.base import SelectionContext
from market_discounts.discounts.selection.policy import MarketSelectionPolicy


class BaseDiscountResolver(ABC):
    """Shared decode and market-selection stages of both resolvers."""

    def __init__(self, selection_policy: Optional[MarketSelectionPolicy] = None):
        self.selection_policy = selection_policy or MarketSelectionPolicy.from_settings()

    @abstractmethod
    def resolve(self, run_input: RunInput) -> RunResult:
        pass

    def select_market(self, run_input: RunInput) -> Tuple[DiscountConfiguration, Optional[MarketConfig]]:
        configuration = decode_configuration(
            run_input.discount.configuration_value,
            run_input.discount.metafield_value,
        )
        market = self.selection_policy.select(configuration.markets, SelectionContext.from_run_input(run_input))
        if market is not None:
            evaluation_context.market_id = market.market_id
        return configuration, market

    @staticmethod
    def candidate_message(run_input: RunInput, configuration: DiscountConfiguration, synthesized: str) -> str:
        """Triggering discount code first, then the configuration title, then the synthesized text."""
        return run_input.triggering_discount_code or configuration.title or synthesized
