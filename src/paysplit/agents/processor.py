import logging
from collections.abc import Callable
from dataclasses import dataclass

from paysplit.domain.models import Order, PaymentScenario
from paysplit.domain.wallet import Wallet
from paysplit.engine.evaluator import evaluate_order
from paysplit.engine.promotions import PromotionRule

logger = logging.getLogger(__name__)

SummarySink = Callable[[list[PaymentScenario]], None]


@dataclass(frozen=True, slots=True)
class OrderFailure:
    order_id: str
    reason: str


def prioritize_orders(orders: list[Order]) -> list[Order]:
    """Orders eligible for more promotions first, then larger orders first."""
    return sorted(orders, key=lambda order: (len(order.eligible_promo_ids), order.value), reverse=True)


class OrderProcessor:
    def __init__(self, rules: list[PromotionRule], summary_sink: SummarySink | None = None):
        if rules is None:
            raise ValueError("Rules are required.")
        self.rules = list(rules)
        self.summary_sink = summary_sink
        self.final_allocations: list[PaymentScenario] = []
        self.failures: list[OrderFailure] = []

    def _process_one(self, order: Order, wallet: Wallet) -> PaymentScenario:
        scenario = evaluate_order(order, wallet, self.rules)
        wallet.apply(scenario)
        logger.info(
            "[order=%s] allocated points=%s card=%s charge=%s discount=%.2f",
            order.id,
            scenario.points_used,
            scenario.card_method.id if scenario.card_method else "-",
            scenario.card_charge,
            scenario.discount_value,
        )
        return scenario

    def process_orders(self, orders: list[Order], wallet: Wallet) -> list[PaymentScenario]:
        if orders is None or wallet is None:
            raise ValueError("Orders and wallet are required.")

        allocations: list[PaymentScenario] = []
        failures: list[OrderFailure] = []

        for order in orders:
            if order is None:
                logger.warning("skipping empty order entry")
                continue

            try:
                allocations.append(self._process_one(order, wallet))
            except ValueError as exc:
                logger.warning("[order=%s] FAILED: %s", order.id, exc)
                failures.append(OrderFailure(order_id=order.id, reason=str(exc)))

        self.final_allocations = allocations
        self.failures = failures

        if failures:
            logger.warning("Failed to process %d order(s): %s", len(failures), ", ".join(f.order_id for f in failures))

        if allocations and self.summary_sink is not None:
            self.summary_sink(allocations)

        return list(allocations)
