import logging

from paysplit.domain.models import ZERO, CardMethod, Order, PaymentScenario
from paysplit.domain.wallet import Wallet
from paysplit.engine.promotions import (
    POINTS_BONUS_RATE,
    PromotionRule,
    applicable_promotions,
    points_bonus_applies,
)
from paysplit.engine.selectors import rank_scenarios

logger = logging.getLogger(__name__)


class NoFeasibleScenarioError(ValueError):
    pass


def _full_points_scenario(order: Order, wallet: Wallet) -> PaymentScenario:
    points = wallet.points_method
    discount = order.value * points.discount_percent
    return PaymentScenario(
        order=order,
        points_method=points,
        points_used=order.value,
        discount_value=discount,
        reasoning=f"points only, rate={points.discount_percent:.2%}, discount={discount:.2f}",
    )


def _full_card_scenario(order: Order, card: CardMethod) -> PaymentScenario:
    discount = order.value * card.discount_percent
    return PaymentScenario(
        order=order,
        card_method=card,
        card_charge=order.value,
        discount_value=discount,
        reasoning=f"card {card.id} only, rate={card.discount_percent:.2%}, discount={discount:.2f}",
    )


def _mixed_scenario(order: Order, wallet: Wallet, card: CardMethod) -> PaymentScenario:
    points = wallet.points_method
    points_amount = points.remaining_limit
    card_amount = order.value - points_amount

    if points_bonus_applies(points_amount, order.value):
        discount = order.value * POINTS_BONUS_RATE
        reason = f"points bonus {POINTS_BONUS_RATE:.0%} of order"
    else:
        discount = points_amount * points.discount_percent + card_amount * card.discount_percent
        reason = f"points at {points.discount_percent:.2%} + card at {card.discount_percent:.2%}"

    return PaymentScenario(
        order=order,
        card_method=card,
        points_method=points,
        points_used=points_amount,
        card_charge=card_amount,
        discount_value=discount,
        reasoning=(
            f"points {points_amount:.2f} + card {card.id} {card_amount:.2f}, "
            f"{reason}, discount={discount:.2f}"
        ),
    )


def generate_scenarios(order: Order, wallet: Wallet) -> list[PaymentScenario]:
    scenarios: list[PaymentScenario] = []
    points = wallet.points_method

    if points is not None and points.can_cover(order.value):
        scenarios.append(_full_points_scenario(order, wallet))

    for card in wallet.card_methods:
        if card.can_cover(order.value):
            scenarios.append(_full_card_scenario(order, card))

    if points is not None and ZERO < points.remaining_limit < order.value:
        shortfall = order.value - points.remaining_limit
        for card in wallet.card_methods:
            if card.can_cover(shortfall):
                scenarios.append(_mixed_scenario(order, wallet, card))

    return scenarios


def _check_rule_shapes(
    order: Order, wallet: Wallet, scenarios: list[PaymentScenario], rules: list[PromotionRule]
) -> None:
    base = PaymentScenario(order=order)
    shapes = {scenario.shape for scenario in scenarios} | {"none"}
    for rule, discount in applicable_promotions(order, wallet, base, rules):
        if rule.shape not in shapes:
            logger.debug(
                "order=%s rule %s applies (discount=%s) but no %s scenario is feasible",
                order.id,
                rule.kind,
                discount,
                rule.shape,
            )


def evaluate_order(order: Order, wallet: Wallet, rules: list[PromotionRule]) -> PaymentScenario:
    if order is None or wallet is None or rules is None:
        raise ValueError("Order, wallet and rules are required.")

    scenarios = generate_scenarios(order, wallet)
    for scenario in scenarios:
        logger.debug("order=%s candidate: %s", order.id, scenario.reasoning)

    if not scenarios:
        raise NoFeasibleScenarioError(
            f"No feasible payment scenario for order {order.id} (value={order.value})"
        )

    _check_rule_shapes(order, wallet, scenarios, rules)

    best = rank_scenarios(scenarios)[0]
    logger.debug("order=%s selected: %s", order.id, best.reasoning)
    return best
