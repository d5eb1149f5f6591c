from typing import List, Optional
from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field, field_validator

from market_discounts.core.constants import DiscountClass
from market_discounts.utils.number_helpers import parse_decimal


class HostModel(BaseModel):
    """Host documents use camelCase keys; unknown keys are ignored"""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Money(HostModel):
    amount: Optional[Decimal] = Field(None, description="Amount; unparseable values are treated as absent")
    currency_code: Optional[str] = Field(None, alias="currencyCode")

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return parse_decimal(value)


class CartLineCost(HostModel):
    subtotal_amount: Optional[Money] = Field(None, alias="subtotalAmount")
    compare_at_amount_per_quantity: Optional[Money] = Field(None, alias="compareAtAmountPerQuantity")


class CartLine(HostModel):
    """Cart line model"""
    id: str
    quantity: Decimal = Field(default=Decimal("1"), description="Line quantity")
    cost: Optional[CartLineCost] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def default_quantity(cls, value):
        parsed = parse_decimal(value)
        return Decimal("1") if parsed is None else parsed

    @property
    def unit_price(self) -> Optional[Decimal]:
        """Subtotal divided by quantity, or None when the subtotal is unknown"""
        if self.cost is None or self.cost.subtotal_amount is None or self.cost.subtotal_amount.amount is None:
            return None
        subtotal = self.cost.subtotal_amount.amount
        if self.quantity <= 0:
            return subtotal
        return subtotal / self.quantity

    @property
    def compare_at_price(self) -> Optional[Decimal]:
        if self.cost is None or self.cost.compare_at_amount_per_quantity is None:
            return None
        return self.cost.compare_at_amount_per_quantity.amount


class DeliveryOptionCost(HostModel):
    currency_code: Optional[str] = Field(None, alias="currencyCode")
    amount: Optional[Decimal] = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value):
        return parse_decimal(value)


class DeliveryOption(HostModel):
    handle: str
    cost: Optional[DeliveryOptionCost] = None

    @property
    def currency_code(self) -> Optional[str]:
        return self.cost.currency_code if self.cost else None


class DeliveryGroup(HostModel):
    id: Optional[str] = None
    delivery_options: List[DeliveryOption] = Field(default_factory=list, alias="deliveryOptions")


class BuyerIdentity(HostModel):
    presentment_currency_code: Optional[str] = Field(None, alias="presentmentCurrencyCode")


class Cart(HostModel):
    lines: List[CartLine] = Field(default_factory=list)
    delivery_groups: List[DeliveryGroup] = Field(default_factory=list, alias="deliveryGroups")
    buyer_identity: Optional[BuyerIdentity] = Field(None, alias="buyerIdentity")
    presentment_currency_code: Optional[str] = Field(None, alias="presentmentCurrencyCode")

    @property
    def presentment_currency(self) -> Optional[str]:
        """Buyer identity currency first, cart-level currency as fallback"""
        if self.buyer_identity and self.buyer_identity.presentment_currency_code:
            return self.buyer_identity.presentment_currency_code
        return self.presentment_currency_code


class MetafieldValue(HostModel):
    value: Optional[str] = None


class Discount(HostModel):
    discount_classes: List[str] = Field(default_factory=list, alias="discountClasses")
    configuration: Optional[MetafieldValue] = None
    metafield: Optional[MetafieldValue] = None

    @field_validator("discount_classes", mode="before")
    @classmethod
    def normalize_classes(cls, value):
        if value is None:
            return []
        if not isinstance(value, (list, tuple)):
            raise ValueError("discountClasses must be a list")
        return [str(item).upper() for item in value]

    def has_class(self, discount_class: str) -> bool:
        return discount_class in self.discount_classes

    @property
    def has_product_class(self) -> bool:
        return self.has_class(DiscountClass.PRODUCT)

    @property
    def has_order_class(self) -> bool:
        return self.has_class(DiscountClass.ORDER)

    @property
    def has_shipping_class(self) -> bool:
        return self.has_class(DiscountClass.SHIPPING)

    @property
    def configuration_value(self) -> Optional[str]:
        return self.configuration.value if self.configuration else None

    @property
    def metafield_value(self) -> Optional[str]:
        return self.metafield.value if self.metafield else None


class LocalizationMarket(HostModel):
    id: Optional[str] = None


class LocalizationCountry(HostModel):
    iso_code: Optional[str] = Field(None, alias="isoCode")


class Localization(HostModel):
    market: Optional[LocalizationMarket] = None
    country: Optional[LocalizationCountry] = None


class LocalTime(HostModel):
    date: Optional[str] = None


class Shop(HostModel):
    local_time: Optional[LocalTime] = Field(None, alias="localTime")


class RunInput(HostModel):
    """Input document for one resolver invocation"""
    cart: Cart
    discount: Discount
    localization: Optional[Localization] = None
    shop: Optional[Shop] = None
    triggering_discount_code: Optional[str] = Field(None, alias="triggeringDiscountCode")

    @property
    def market_id(self) -> Optional[str]:
        if self.localization and self.localization.market:
            return self.localization.market.id
        return None

    @property
    def country_code(self) -> Optional[str]:
        if self.localization and self.localization.country:
            return self.localization.country.iso_code
        return None

    @property
    def shop_date(self) -> Optional[str]:
        if self.shop and self.shop.local_time:
            return self.shop.local_time.date
        return None
