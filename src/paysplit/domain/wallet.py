import logging
from collections.abc import Iterable
from decimal import Decimal

from paysplit.domain.models import (
    ZERO,
    CardMethod,
    InsufficientLimitError,
    PaymentMethod,
    PaymentScenario,
    PointsMethod,
)

logger = logging.getLogger(__name__)


class Wallet:
    """All payment methods of one payer.

    Balances only change through ``apply``, which deducts a whole scenario or
    nothing at all.
    """

    def __init__(self, card_methods: Iterable[CardMethod] = (), points_method: PointsMethod | None = None):
        cards = tuple(card_methods)
        seen: set[str] = set()
        for card in cards:
            if not isinstance(card, CardMethod):
                raise ValueError(f"Not a card method: {card!r}")
            if card.id in seen:
                raise ValueError(f"Duplicate card id: {card.id}")
            seen.add(card.id)

        self._cards = cards
        self._points = points_method

    @classmethod
    def from_methods(cls, methods: Iterable[PaymentMethod]) -> "Wallet":
        cards: list[CardMethod] = []
        points: PointsMethod | None = None
        for method in methods:
            if isinstance(method, PointsMethod):
                if points is not None:
                    raise ValueError("A wallet holds at most one points method.")
                points = method
            else:
                cards.append(method)
        return cls(cards, points)

    @property
    def points_method(self) -> PointsMethod | None:
        return self._points

    @property
    def card_methods(self) -> tuple[CardMethod, ...]:
        return self._cards

    @property
    def payment_methods(self) -> list[PaymentMethod]:
        methods: list[PaymentMethod] = list(self._cards)
        if self._points is not None:
            methods.append(self._points)
        return methods

    def find_card(self, card_id: str) -> CardMethod | None:
        return next((card for card in self._cards if card.id == card_id), None)

    def total_remaining_card_limit(self) -> Decimal:
        return sum((card.remaining_limit for card in self._cards), ZERO)

    def total_remaining_points(self) -> Decimal:
        return self._points.remaining_limit if self._points is not None else ZERO

    def remaining_limits(self) -> dict[str, Decimal]:
        return {method.id: method.remaining_limit for method in self.payment_methods}

    def apply(self, scenario: PaymentScenario) -> None:
        if scenario is None:
            raise ValueError("Scenario is required.")

        card = scenario.card_method
        points = scenario.points_method

        # Everything is checked up front so a rejected scenario leaves no trace.
        if card is not None and self.find_card(card.id) is not card:
            raise ValueError(f"Card {card.id} does not belong to this wallet.")
        if scenario.uses_points and (points is None or points is not self._points):
            raise ValueError("Points method does not belong to this wallet.")
        if card is not None and not card.can_cover(scenario.card_charge):
            raise InsufficientLimitError(
                f"Insufficient limit on {card.id}: have={card.remaining_limit}, need={scenario.card_charge}"
            )
        if scenario.uses_points and not points.can_cover(scenario.points_used):
            raise InsufficientLimitError(
                f"Insufficient points: have={points.remaining_limit}, need={scenario.points_used}"
            )

        if scenario.uses_points:
            points.deduct(scenario.points_used)
        if card is not None and scenario.card_charge > 0:
            card.deduct(scenario.card_charge)

        logger.debug(
            "order=%s applied points=%s card=%s charge=%s",
            scenario.order.id,
            scenario.points_used,
            card.id if card is not None else None,
            scenario.card_charge,
        )
