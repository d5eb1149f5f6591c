from typing import Dict, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class OperationModel(BaseModel):
    """Output documents are emitted with camelCase keys"""
    model_config = ConfigDict(populate_by_name=True)


class CartLineTarget(OperationModel):
    id: str


class OrderSubtotalTarget(OperationModel):
    excluded_cart_line_ids: List[str] = Field(default_factory=list, alias="excludedCartLineIds")


class DeliveryOptionTarget(OperationModel):
    handle: str


class DiscountTarget(OperationModel):
    """Exactly one of the target kinds is set"""
    cart_line: Optional[CartLineTarget] = Field(None, alias="cartLine")
    order_subtotal: Optional[OrderSubtotalTarget] = Field(None, alias="orderSubtotal")
    delivery_option: Optional[DeliveryOptionTarget] = Field(None, alias="deliveryOption")


class PercentageValue(OperationModel):
    value: Union[int, float]


class FixedAmountValue(OperationModel):
    amount: str


class DiscountValue(OperationModel):
    percentage: Optional[PercentageValue] = None
    fixed_amount: Optional[FixedAmountValue] = Field(None, alias="fixedAmount")


class DiscountCandidate(OperationModel):
    message: Optional[str] = None
    targets: List[DiscountTarget]
    value: DiscountValue


class DiscountsAdd(OperationModel):
    candidates: List[DiscountCandidate]
    selection_strategy: str = Field(..., alias="selectionStrategy")


class DiscountOperation(OperationModel):
    """Tagged operation; exactly one variant is set"""
    product_discounts_add: Optional[DiscountsAdd] = Field(None, alias="productDiscountsAdd")
    order_discounts_add: Optional[DiscountsAdd] = Field(None, alias="orderDiscountsAdd")
    delivery_discounts_add: Optional[DiscountsAdd] = Field(None, alias="deliveryDiscountsAdd")

    @property
    def kind(self) -> str:
        if self.product_discounts_add is not None:
            return "productDiscountsAdd"
        if self.order_discounts_add is not None:
            return "orderDiscountsAdd"
        return "deliveryDiscountsAdd"

    @property
    def body(self) -> DiscountsAdd:
        return self.product_discounts_add or self.order_discounts_add or self.delivery_discounts_add


class RunResult(OperationModel):
    operations: List[DiscountOperation] = Field(default_factory=list)

    def to_payload(self) -> Dict:
        return self.model_dump(by_alias=True, exclude_none=True)
