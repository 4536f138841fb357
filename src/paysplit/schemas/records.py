from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

from paysplit.domain.models import CardMethod, Order, PaymentMethod, PointsMethod

DiscountUnit = Literal["percent", "fraction"]

HUNDRED = Decimal("100")


def normalize_rate(raw_value: Decimal, unit: DiscountUnit) -> Decimal:
    rate = raw_value / HUNDRED if unit == "percent" else raw_value
    if rate < 0 or rate > 1:
        raise ValueError(f"Discount rate out of range [0, 1]: {raw_value} ({unit})")
    return rate


class OrderRecord(BaseModel):
    id: str
    value: Decimal = Field(ge=0)
    promotions: list[str] | None = None

    def to_domain(self) -> Order:
        return Order(id=self.id, value=self.value, eligible_promo_ids=frozenset(self.promotions or ()))


class PaymentMethodRecord(BaseModel):
    id: str
    discount: Decimal = Field(ge=0)
    limit: Decimal = Field(ge=0)

    def to_domain(self, points_method_id: str, discount_unit: DiscountUnit = "percent") -> PaymentMethod:
        rate = normalize_rate(self.discount, discount_unit)
        if self.id == points_method_id:
            return PointsMethod(id=self.id, discount_percent=rate, remaining_limit=self.limit)
        return CardMethod(id=self.id, discount_percent=rate, remaining_limit=self.limit)
