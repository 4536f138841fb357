"""Shared fixtures: small wallets built from exact decimals."""

from decimal import Decimal

import pytest

from paysplit.domain.models import CardMethod, Order, PointsMethod
from paysplit.domain.wallet import Wallet


def D(value: str) -> Decimal:
    return Decimal(value)


@pytest.fixture
def make_wallet():
    def _make(points: tuple[str, str] | None = None, cards: list[tuple[str, str, str]] | tuple = ()) -> Wallet:
        points_method = None
        if points is not None:
            rate, limit = points
            points_method = PointsMethod(discount_percent=D(rate), remaining_limit=D(limit))
        card_methods = [
            CardMethod(id=card_id, discount_percent=D(rate), remaining_limit=D(limit))
            for card_id, rate, limit in cards
        ]
        return Wallet(card_methods, points_method)

    return _make


@pytest.fixture
def make_order():
    def _make(order_id: str, value: str, promos: tuple[str, ...] = ()) -> Order:
        return Order(id=order_id, value=D(value), eligible_promo_ids=frozenset(promos))

    return _make


@pytest.fixture
def wallet(make_wallet) -> Wallet:
    return make_wallet(points=("0.15", "200.00"), cards=[("c1", "0.10", "1000.00")])
