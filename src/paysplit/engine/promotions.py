from abc import abstractmethod
from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from paysplit.domain.models import ZERO, Order, PaymentScenario
from paysplit.domain.wallet import Wallet

POINTS_BONUS_THRESHOLD = Decimal("0.10")
POINTS_BONUS_RATE = Decimal("0.10")


def points_bonus_applies(points_amount: Decimal, order_value: Decimal) -> bool:
    return points_amount > 0 and points_amount >= order_value * POINTS_BONUS_THRESHOLD


class _RuleBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def is_applicable(self, order: Order, wallet: Wallet, base: PaymentScenario) -> bool:
        raise NotImplementedError

    @abstractmethod
    def _discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        raise NotImplementedError

    def compute_discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        if not self.is_applicable(order, wallet, base):
            return ZERO
        return self._discount(order, wallet, base)


class FullPointsRule(_RuleBase):
    kind: Literal["full_points"] = "full_points"
    shape: Literal["full_points"] = "full_points"

    def is_applicable(self, order: Order, wallet: Wallet, base: PaymentScenario) -> bool:
        points = wallet.points_method
        if points is None or base.uses_points:
            return False
        return points.can_cover(order.value)

    def _discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        return order.value * wallet.points_method.discount_percent


class PartialPointsRule(_RuleBase):
    """Points cover part of the order; a card with room for the rest pays the rest.

    Once points reach 10% of the order value the whole order earns a flat 10%.
    """

    kind: Literal["partial_points"] = "partial_points"
    shape: Literal["mixed"] = "mixed"

    def is_applicable(self, order: Order, wallet: Wallet, base: PaymentScenario) -> bool:
        points = wallet.points_method
        if points is None or base.uses_points:
            return False
        if not ZERO < points.remaining_limit < order.value:
            return False
        shortfall = order.value - points.remaining_limit
        return any(card.can_cover(shortfall) for card in wallet.card_methods)

    def _discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        points = wallet.points_method
        if points_bonus_applies(points.remaining_limit, order.value):
            return order.value * POINTS_BONUS_RATE
        return points.remaining_limit * points.discount_percent


class FullCardRule(_RuleBase):
    kind: Literal["full_card"] = "full_card"
    shape: Literal["full_card"] = "full_card"
    card_id: str

    def is_applicable(self, order: Order, wallet: Wallet, base: PaymentScenario) -> bool:
        if not order.has_promotion(self.card_id) or base.uses_card:
            return False
        card = wallet.find_card(self.card_id)
        return card is not None and card.can_cover(order.value)

    def _discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        return order.value * wallet.find_card(self.card_id).discount_percent


class DefaultRule(_RuleBase):
    kind: Literal["default"] = "default"
    shape: Literal["none"] = "none"

    def is_applicable(self, order: Order, wallet: Wallet, base: PaymentScenario) -> bool:
        return True

    def _discount(self, order: Order, wallet: Wallet, base: PaymentScenario) -> Decimal:
        return ZERO


PromotionRule = Annotated[
    FullPointsRule | PartialPointsRule | FullCardRule | DefaultRule,
    Field(discriminator="kind"),
]


def default_rules(wallet: Wallet) -> list[PromotionRule]:
    rules: list[PromotionRule] = [FullPointsRule(), PartialPointsRule(), DefaultRule()]
    rules.extend(FullCardRule(card_id=card.id) for card in wallet.card_methods)
    return rules


def applicable_promotions(
    order: Order, wallet: Wallet, base: PaymentScenario, rules: list[PromotionRule]
) -> list[tuple[PromotionRule, Decimal]]:
    return [
        (rule, rule.compute_discount(order, wallet, base))
        for rule in rules
        if rule.is_applicable(order, wallet, base)
    ]
