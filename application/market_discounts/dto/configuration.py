from datetime import date
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from market_discounts.core.constants import ValueType, ValueSlotName
from market_discounts.utils.datetime_helpers import parse_calendar_date
from market_discounts.utils.number_helpers import safe_decimal


class ValueSlot(BaseModel):
    """One discount value slot: a type plus percentage and fixed amounts"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str = Field(ValueType.PERCENTAGE, description="percentage or fixed")
    percentage: Decimal = Field(Decimal("0"), description="Percentage off, 0-100 expected")
    fixed: Decimal = Field(Decimal("0"), description="Fixed amount off in the market currency")

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, value):
        if not value:
            return ValueType.PERCENTAGE
        return str(value).lower()

    @field_validator("percentage", "fixed", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return safe_decimal(value)


SLOT_FIELD_NAMES = {
    ValueSlotName.CART_LINE: "cart_line",
    ValueSlotName.ORDER: "order",
    ValueSlotName.DELIVERY: "delivery",
}


class MarketConfig(BaseModel):
    """Discount configuration for one commerce market"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    market_id: Optional[str] = Field(None, alias="marketId")
    market_name: str = Field("", alias="marketName")
    currency_code: Optional[str] = Field(None, alias="currencyCode")
    country_code: Optional[str] = Field(None, alias="countryCode")
    active: bool = False
    start_date: Optional[date] = Field(None, alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    exclude_on_sale: bool = Field(False, alias="excludeOnSale")
    cart_line: ValueSlot = Field(default_factory=ValueSlot, alias=ValueSlotName.CART_LINE)
    order: ValueSlot = Field(default_factory=ValueSlot, alias=ValueSlotName.ORDER)
    delivery: ValueSlot = Field(default_factory=ValueSlot, alias=ValueSlotName.DELIVERY)

    @model_validator(mode="before")
    @classmethod
    def fold_flat_slots(cls, data):
        """Accept the flat admin shape (cartLineType, cartLinePercentage, cartLineFixed, ...)"""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for prefix, field_name in SLOT_FIELD_NAMES.items():
            if data.get(prefix) is not None or data.get(field_name) is not None:
                continue
            data[prefix] = {
                "type": data.get(f"{prefix}Type"),
                "percentage": data.get(f"{prefix}Percentage"),
                "fixed": data.get(f"{prefix}Fixed"),
            }
        return data

    @field_validator("market_id", "market_name", "currency_code", "country_code", mode="before")
    @classmethod
    def coerce_scalar(cls, value):
        # ids arrive as JSON numbers from some admin exports
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("market_name", mode="before")
    @classmethod
    def default_name(cls, value):
        return value or ""

    @field_validator("active", "exclude_on_sale", mode="before")
    @classmethod
    def default_flag(cls, value):
        return False if value is None else value

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, value):
        return parse_calendar_date(value)


class DiscountConfiguration(BaseModel):
    """Decoded discount configuration attached to the discount record"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    markets: List[MarketConfig] = Field(default_factory=list)
    title: Optional[str] = None
