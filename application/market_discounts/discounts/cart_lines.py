from typing import List, Optional

# Constants
from market_discounts.core.constants import AmountPrecision, DiscountTargetLabel, SelectionStrategy

# DTOs
from market_discounts.dto.configuration import DiscountConfiguration, MarketConfig
from market_discounts.dto.operations import (
    CartLineTarget, DiscountCandidate, DiscountOperation, DiscountsAdd, DiscountTarget,
    OrderSubtotalTarget, RunResult
)
from market_discounts.dto.run_input import RunInput

from market_discounts.discounts.base import BaseDiscountResolver
from market_discounts.discounts.eligibility import LineEligibilityFilter
from market_discounts.discounts.values import resolve_slot_value

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.cart_lines")


class CartLinesResolver(BaseDiscountResolver):
    """Order-subtotal and product-line operations for the cart's lines."""

    def resolve(self, run_input: RunInput) -> RunResult:
        """Run the cart-lines pipeline.

        Args:
            run_input: host input for this evaluation

        Returns:
            RunResult with the order operation (if any) before the product operation (if any)
        """
        if not run_input.cart.lines:
            logger.info("cart_lines_resolve_skipped | reason=no_cart_lines")
            return RunResult()

        discount = run_input.discount
        if not discount.has_order_class and not discount.has_product_class:
            logger.info(f"cart_lines_resolve_skipped | reason=no_matching_discount_class classes={discount.discount_classes}")
            return RunResult()

        configuration, market = self.select_market(run_input)
        if market is None:
            return RunResult()

        operations = []
        if discount.has_order_class:
            order_operation = self.build_order_operation(run_input, configuration, market)
            if order_operation:
                operations.append(order_operation)

        if discount.has_product_class:
            product_operation = self.build_product_operation(run_input, configuration, market)
            if product_operation:
                operations.append(product_operation)

        logger.info(f"cart_lines_resolved | market_id={market.market_id} operations={[op.kind for op in operations]}")
        return RunResult(operations=operations)

    def build_order_operation(self, run_input: RunInput, configuration: DiscountConfiguration, market: MarketConfig) -> Optional[DiscountOperation]:
        value = resolve_slot_value(market.order, AmountPrecision.ORDER)
        if value is None:
            logger.debug(f"order_operation_skipped | market_id={market.market_id} reason=no_positive_value")
            return None

        message = self.candidate_message(
            run_input, configuration, f"{value.describe(market.currency_code)} {DiscountTargetLabel.ORDER}"
        )
        candidate = DiscountCandidate(
            message=message,
            targets=[DiscountTarget(order_subtotal=OrderSubtotalTarget(excluded_cart_line_ids=[]))],
            value=value.to_discount_value(),
        )
        return DiscountOperation(
            order_discounts_add=DiscountsAdd(candidates=[candidate], selection_strategy=SelectionStrategy.FIRST)
        )

    def build_product_operation(self, run_input: RunInput, configuration: DiscountConfiguration, market: MarketConfig) -> Optional[DiscountOperation]:
        value = resolve_slot_value(market.cart_line, AmountPrecision.CART_LINE)
        if value is None:
            logger.debug(f"product_operation_skipped | market_id={market.market_id} reason=no_positive_value")
            return None

        eligible_lines = LineEligibilityFilter.get_eligible_lines(run_input.cart.lines, market)
        if not eligible_lines:
            logger.info(f"product_operation_skipped | market_id={market.market_id} reason=no_eligible_lines")
            return None

        message = self.candidate_message(
            run_input, configuration, f"{value.describe(market.currency_code)} {DiscountTargetLabel.PRODUCT}"
        )
        discount_value = value.to_discount_value()
        # one candidate per line so a fixed amount applies to every line
        candidates: List[DiscountCandidate] = [
            DiscountCandidate(
                message=message,
                targets=[DiscountTarget(cart_line=CartLineTarget(id=line.id))],
                value=discount_value,
            )
            for line in eligible_lines
        ]
        return DiscountOperation(
            product_discounts_add=DiscountsAdd(candidates=candidates, selection_strategy=SelectionStrategy.ALL)
        )
