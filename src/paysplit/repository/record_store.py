import json
from decimal import Decimal
from pathlib import Path

from pydantic import TypeAdapter

from paysplit.domain.models import POINTS_METHOD_ID, Order, PaymentMethod
from paysplit.domain.wallet import Wallet
from paysplit.schemas.records import DiscountUnit, OrderRecord, PaymentMethodRecord

_order_records = TypeAdapter(list[OrderRecord])
_method_records = TypeAdapter(list[PaymentMethodRecord])


def _read_json(path: Path):
    if not path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh, parse_float=Decimal)


class RecordStore:
    def __init__(
        self,
        orders_file: str,
        payment_methods_file: str,
        points_method_id: str = POINTS_METHOD_ID,
        discount_unit: DiscountUnit = "percent",
    ):
        self.orders_file = Path(orders_file)
        self.payment_methods_file = Path(payment_methods_file)
        self.points_method_id = points_method_id
        self.discount_unit = discount_unit

    def load_orders(self) -> list[Order]:
        records = _order_records.validate_python(_read_json(self.orders_file))
        return [record.to_domain() for record in records]

    def load_payment_methods(self) -> list[PaymentMethod]:
        records = _method_records.validate_python(_read_json(self.payment_methods_file))
        return [record.to_domain(self.points_method_id, self.discount_unit) for record in records]

    def load_wallet(self) -> Wallet:
        return Wallet.from_methods(self.load_payment_methods())
