from typing import List

# DTOs
from market_discounts.dto.configuration import MarketConfig
from market_discounts.dto.run_input import CartLine

# Logging
from market_discounts.logging.utils import get_app_logger
logger = get_app_logger("market_discounts.discounts.eligibility")


class LineEligibilityFilter:
    """Decides which cart lines may receive a product-level discount"""

    @staticmethod
    def is_on_sale(line: CartLine) -> bool:
        """
        A line is on sale when its compare-at price per unit exists and is
        strictly greater than its current unit price.

        Args:
            line: cart line with cost information

        Returns:
            True if the line is on sale, False otherwise (including when prices are missing)
        """
        compare_at_price = line.compare_at_price
        if compare_at_price is None:
            return False

        unit_price = line.unit_price
        if unit_price is None:
            return False

        return compare_at_price > unit_price

    @staticmethod
    def get_eligible_lines(lines: List[CartLine], market: MarketConfig) -> List[CartLine]:
        """
        Filter cart lines for product discounting.

        Args:
            lines: cart lines in cart order
            market: selected market configuration

        Returns:
            Eligible lines, order preserved
        """
        if not market.exclude_on_sale:
            return list(lines)

        eligible_lines = []
        for line in lines:
            if LineEligibilityFilter.is_on_sale(line):
                logger.debug(f"Line {line.id} excluded as on sale: compare_at={line.compare_at_price} unit_price={line.unit_price}")
                continue
            eligible_lines.append(line)

        logger.info(f"Filtering lines | total_lines={len(lines)} eligible_lines={len(eligible_lines)} exclude_on_sale=True")
        return eligible_lines
