from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Tuple

# Constants
from market_discounts.core.constants import ValueType

# DTOs
from market_discounts.dto.configuration import ValueSlot
from market_discounts.dto.operations import DiscountValue, FixedAmountValue, PercentageValue

# Utils
from market_discounts.utils.number_helpers import format_number, to_fixed, to_json_number


@dataclass(frozen=True)
class EffectiveValue:
    """The single value a slot resolves to."""

    value_type: str
    amount: Decimal
    precision: int

    @property
    def is_fixed(self) -> bool:
        return self.value_type == ValueType.FIXED

    def rendered_amount(self) -> str:
        return to_fixed(self.amount, self.precision)

    def to_discount_value(self) -> DiscountValue:
        if self.is_fixed:
            return DiscountValue(fixed_amount=FixedAmountValue(amount=self.rendered_amount()))
        return DiscountValue(percentage=PercentageValue(value=to_json_number(self.amount)))

    def describe(self, currency_code: Optional[str]) -> str:
        """Message amount, e.g. `10.0 CAD` for fixed amounts or `15%` for percentages."""
        if self.is_fixed:
            if currency_code:
                return f"{self.rendered_amount()} {currency_code}"
            return self.rendered_amount()
        return f"{format_number(self.amount)}%"


# Rows are checked top to bottom; the first predicate that holds decides the outcome.
SLOT_DECISION_TABLE: Tuple[Tuple[Callable[[ValueSlot], bool], str], ...] = (
    (lambda slot: slot.type == ValueType.FIXED and slot.fixed > 0, ValueType.FIXED),
    (lambda slot: slot.percentage > 0, ValueType.PERCENTAGE),
)

SLOT_AMOUNT_GETTERS = {
    ValueType.FIXED: lambda slot: slot.fixed,
    ValueType.PERCENTAGE: lambda slot: slot.percentage,
}


def resolve_slot_value(slot: ValueSlot, precision: int) -> Optional[EffectiveValue]:
    """Resolve a value slot through the decision table.

    Args:
        slot: cartLine, order or delivery slot of a market
        precision: fraction digits for fixed amounts

    Returns:
        EffectiveValue, or None when neither amount is positive
    """
    for predicate, value_type in SLOT_DECISION_TABLE:
        if predicate(slot):
            return EffectiveValue(value_type=value_type, amount=SLOT_AMOUNT_GETTERS[value_type](slot), precision=precision)
    return None
