from paysplit.agents.processor import OrderProcessor, prioritize_orders
from paysplit.domain.models import Order
from paysplit.domain.wallet import Wallet
from paysplit.engine.promotions import default_rules
from paysplit.report.summary import SummaryReporter, aggregate_totals, format_summary
from paysplit.schemas.records import DiscountUnit
from paysplit.schemas.requests import AllocateRequest
from paysplit.schemas.responses import AllocateResponse, AllocationRecord, OrderFailureRecord


class AllocationOrchestrator:
    def __init__(self, points_method_id: str, discount_unit: DiscountUnit = "percent"):
        self.points_method_id = points_method_id
        self.discount_unit = discount_unit

    def _build_wallet(self, request: AllocateRequest) -> Wallet:
        if not request.payment_methods:
            raise ValueError("At least one payment method is required.")

        methods = [
            record.to_domain(self.points_method_id, self.discount_unit) for record in request.payment_methods
        ]
        return Wallet.from_methods(methods)

    def run(
        self,
        orders: list[Order],
        wallet: Wallet,
        prioritize: bool = False,
        reporter: SummaryReporter | None = None,
    ) -> OrderProcessor:
        processor = OrderProcessor(default_rules(wallet), summary_sink=reporter)
        batch = prioritize_orders(orders) if prioritize else orders
        processor.process_orders(batch, wallet)
        return processor

    def allocate(self, request: AllocateRequest) -> AllocateResponse:
        wallet = self._build_wallet(request)
        orders = [record.to_domain() for record in request.orders]
        processor = self.run(orders, wallet, prioritize=request.prioritize)

        totals = aggregate_totals(processor.final_allocations)
        return AllocateResponse(
            allocations=[AllocationRecord.from_scenario(item) for item in processor.final_allocations],
            failures=[OrderFailureRecord(order_id=f.order_id, reason=f.reason) for f in processor.failures],
            totals=totals,
            summary=format_summary(totals),
            remaining_limits=wallet.remaining_limits(),
        )
