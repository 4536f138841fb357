from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

POINTS_METHOD_ID = "PUNKTY"

ZERO = Decimal("0")


class InsufficientLimitError(ValueError):
    pass


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    value: Decimal = Field(ge=0)
    eligible_promo_ids: frozenset[str] = frozenset()

    def has_promotion(self, promo_id: str) -> bool:
        return promo_id in self.eligible_promo_ids


class _MethodBase(BaseModel):
    id: str
    discount_percent: Decimal = Field(ge=0, le=1)
    remaining_limit: Decimal = Field(ge=0)

    @property
    def is_card(self) -> bool:
        return False

    def can_cover(self, amount: Decimal) -> bool:
        return self.remaining_limit >= amount

    def deduct(self, amount: Decimal) -> None:
        if amount is None or amount < 0:
            raise ValueError("Amount must be non-negative.")

        new_limit = self.remaining_limit - amount
        if new_limit < 0:
            raise InsufficientLimitError(
                f"Insufficient limit on {self.id}: have={self.remaining_limit}, need={amount}"
            )
        self.remaining_limit = new_limit


class CardMethod(_MethodBase):
    kind: Literal["card"] = "card"

    @property
    def is_card(self) -> bool:
        return True


class PointsMethod(_MethodBase):
    kind: Literal["points"] = "points"
    id: str = POINTS_METHOD_ID


PaymentMethod = Annotated[CardMethod | PointsMethod, Field(discriminator="kind")]


class PaymentScenario(BaseModel):
    """One concrete way to pay one order.

    Holds references to the wallet's methods; applying it is the wallet's job.
    """

    model_config = ConfigDict(frozen=True)

    order: Order
    card_method: CardMethod | None = None
    points_method: PointsMethod | None = None
    points_used: Decimal = Field(default=ZERO, ge=0)
    card_charge: Decimal = Field(default=ZERO, ge=0)
    discount_value: Decimal = Field(default=ZERO, ge=0)
    reasoning: str = ""

    @model_validator(mode="after")
    def _check_method_refs(self) -> "PaymentScenario":
        if self.points_used > 0 and self.points_method is None:
            raise ValueError("points_used requires a points method.")
        if self.card_charge > 0 and self.card_method is None:
            raise ValueError("card_charge requires a card method.")
        return self

    @property
    def uses_card(self) -> bool:
        return self.card_method is not None

    @property
    def uses_points(self) -> bool:
        return self.points_used > 0

    @property
    def amount_paid(self) -> Decimal:
        return self.points_used + self.card_charge

    @property
    def shape(self) -> str:
        if self.uses_card and self.uses_points:
            return "mixed"
        if self.uses_card:
            return "full_card"
        if self.uses_points:
            return "full_points"
        return "none"
