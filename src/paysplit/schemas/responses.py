from decimal import Decimal

from pydantic import BaseModel

from paysplit.domain.models import PaymentScenario


class AllocationRecord(BaseModel):
    order_id: str
    uses_points: bool
    uses_card: bool
    card_id: str | None = None
    points_used: Decimal
    card_charge: Decimal
    discount_value: Decimal
    reasoning: str = ""

    @classmethod
    def from_scenario(cls, scenario: PaymentScenario) -> "AllocationRecord":
        return cls(
            order_id=scenario.order.id,
            uses_points=scenario.uses_points,
            uses_card=scenario.uses_card,
            card_id=scenario.card_method.id if scenario.card_method else None,
            points_used=scenario.points_used,
            card_charge=scenario.card_charge,
            discount_value=scenario.discount_value,
            reasoning=scenario.reasoning,
        )


class OrderFailureRecord(BaseModel):
    order_id: str
    reason: str


class AllocateResponse(BaseModel):
    allocations: list[AllocationRecord]
    failures: list[OrderFailureRecord]
    totals: dict[str, Decimal]
    summary: list[str]
    remaining_limits: dict[str, Decimal]
