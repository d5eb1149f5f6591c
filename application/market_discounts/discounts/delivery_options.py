from typing import Optional

# Constants
from market_discounts.core.constants import AmountPrecision, DiscountTargetLabel, SelectionStrategy
from market_discounts.core.exceptions import MissingDeliveryGroupsError

# DTOs
from market_discounts.dto.configuration import DiscountConfiguration, MarketConfig
from market_discounts.dto.operations import (
    DeliveryOptionTarget, DiscountCandidate, DiscountOperation, DiscountsAdd, DiscountTarget, RunResult
)
from market_discounts.dto.run_input import DeliveryOption, RunInput

from market_discounts.discounts.base import BaseDiscountResolver
from market_discounts.discounts.values import resolve_slot_value

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.delivery_options")


class DeliveryOptionsResolver(BaseDiscountResolver):
    """Delivery discount candidates for the options of the first delivery group."""

    def resolve(self, run_input: RunInput) -> RunResult:
        """Run the delivery-options pipeline.

        Raises:
            MissingDeliveryGroupsError: if the cart has no delivery groups
        """
        delivery_groups = run_input.cart.delivery_groups
        if not delivery_groups:
            logger.error("delivery_options_resolve_failed | reason=no_delivery_groups")
            raise MissingDeliveryGroupsError("No delivery groups found")

        discount = run_input.discount
        if not discount.has_shipping_class:
            logger.info(f"delivery_options_resolve_skipped | reason=no_shipping_class classes={discount.discount_classes}")
            return RunResult()

        configuration, market = self.select_market(run_input)
        if market is None:
            return RunResult()

        first_group = delivery_groups[0]
        candidates = []
        for option in first_group.delivery_options:
            candidate = self.build_candidate(run_input, configuration, market, option)
            if candidate is not None:
                candidates.append(candidate)

        if not candidates:
            logger.info(f"delivery_options_resolved | market_id={market.market_id} candidates=0")
            return RunResult()

        logger.info(f"delivery_options_resolved | market_id={market.market_id} candidates={len(candidates)}")
        return RunResult(operations=[
            DiscountOperation(
                delivery_discounts_add=DiscountsAdd(candidates=candidates, selection_strategy=SelectionStrategy.ALL)
            )
        ])

    def build_candidate(self, run_input: RunInput, configuration: DiscountConfiguration, market: MarketConfig, option: DeliveryOption) -> Optional[DiscountCandidate]:
        value = resolve_slot_value(market.delivery, AmountPrecision.DELIVERY)
        if value is None:
            logger.debug(f"delivery_candidate_dropped | handle={option.handle} reason=no_positive_value")
            return None

        currency_code = option.currency_code or market.currency_code
        message = self.candidate_message(
            run_input, configuration, f"{value.describe(currency_code)} {DiscountTargetLabel.DELIVERY}"
        )
        return DiscountCandidate(
            message=message,
            targets=[DiscountTarget(delivery_option=DeliveryOptionTarget(handle=option.handle))],
            value=value.to_discount_value(),
        )
