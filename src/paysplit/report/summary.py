"""Aggregate funds spent per payment method and render them as text lines."""

from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from paysplit.domain.models import ZERO, PaymentScenario

CENTS = Decimal("0.01")


def aggregate_totals(scenarios: list[PaymentScenario]) -> dict[str, Decimal]:
    """Sum charged amounts per method id, cards in first-seen order, points last."""
    card_totals: dict[str, Decimal] = {}
    points_totals: dict[str, Decimal] = {}

    for scenario in scenarios:
        if scenario.uses_card:
            card_id = scenario.card_method.id
            card_totals[card_id] = card_totals.get(card_id, ZERO) + scenario.card_charge
        if scenario.uses_points:
            points_id = scenario.points_method.id
            points_totals[points_id] = points_totals.get(points_id, ZERO) + scenario.points_used

    return {**card_totals, **points_totals}


def format_summary(totals: dict[str, Decimal]) -> list[str]:
    return [f"{method_id} {amount.quantize(CENTS, rounding=ROUND_HALF_UP)}" for method_id, amount in totals.items()]


class SummaryReporter:
    """Summary sink that writes one line per payment method."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write
        self.last_lines: list[str] = []

    def __call__(self, scenarios: list[PaymentScenario]) -> None:
        self.last_lines = format_summary(aggregate_totals(scenarios))
        for line in self.last_lines:
            self.write(line)
