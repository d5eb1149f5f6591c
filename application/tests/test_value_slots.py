from decimal import Decimal

import pytest

from market_discounts.core.constants import ValueType
from market_discounts.discounts.values import resolve_slot_value
from market_discounts.dto.configuration import ValueSlot


@pytest.mark.parametrize("slot, expected", [
    (ValueSlot(type="fixed", fixed="10", percentage="25"), (ValueType.FIXED, Decimal("10"))),
    (ValueSlot(type="fixed", fixed="0", percentage="25"), (ValueType.PERCENTAGE, Decimal("25"))),
    (ValueSlot(type="fixed", fixed="-3", percentage="25"), (ValueType.PERCENTAGE, Decimal("25"))),
    (ValueSlot(type="percentage", fixed="10", percentage="25"), (ValueType.PERCENTAGE, Decimal("25"))),
    (ValueSlot(type="percentage", fixed="10", percentage="0"), None),
    (ValueSlot(type="fixed", fixed="0", percentage="0"), None),
    (ValueSlot(), None),
])
def test_decision_table(slot, expected):
    value = resolve_slot_value(slot, precision=1)

    if expected is None:
        assert value is None
    else:
        assert (value.value_type, value.amount) == expected


def test_fixed_value_renders_with_precision():
    slot = ValueSlot(type="fixed", fixed="10")

    assert resolve_slot_value(slot, precision=1).to_discount_value().model_dump(by_alias=True, exclude_none=True) == {
        "fixedAmount": {"amount": "10.0"}
    }
    assert resolve_slot_value(slot, precision=2).rendered_amount() == "10.00"


def test_percentage_value_is_a_plain_number():
    value = resolve_slot_value(ValueSlot(percentage="15"), precision=1)

    assert value.to_discount_value().model_dump(by_alias=True, exclude_none=True) == {"percentage": {"value": 15}}
    assert value.describe("CAD") == "15%"


def test_percentage_is_not_clamped():
    value = resolve_slot_value(ValueSlot(percentage="150"), precision=1)

    assert value.amount == Decimal("150")


def test_fixed_description_includes_currency():
    value = resolve_slot_value(ValueSlot(type="FIXED", fixed="7.25"), precision=1)

    assert value.describe("EUR") == "7.3 EUR"
    assert value.describe(None) == "7.3"
