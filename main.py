import argparse
import logging
import sys

from paysplit.agents.orchestrator import AllocationOrchestrator
from paysplit.api.app import run as run_api
from paysplit.config import settings
from paysplit.report.summary import SummaryReporter
from paysplit.repository.record_store import RecordStore

logger = logging.getLogger("paysplit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PaySplit unified entrypoint")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["run", "api"],
        default="run",
        help="Run mode: run (default) processes the order files, api serves HTTP",
    )
    parser.add_argument("orders_file", nargs="?", default=settings.orders_file)
    parser.add_argument("payment_methods_file", nargs="?", default=settings.payment_methods_file)
    parser.add_argument(
        "--prioritize",
        action="store_true",
        default=settings.prioritize_orders,
        help="Process orders with more promotions (then larger value) first",
    )
    return parser


def run_batch(args: argparse.Namespace) -> int:
    store = RecordStore(
        args.orders_file,
        args.payment_methods_file,
        points_method_id=settings.points_method_id,
        discount_unit=settings.discount_unit,
    )
    try:
        orders = store.load_orders()
        wallet = store.load_wallet()
    except (OSError, ValueError) as exc:
        logger.error("Error reading input: %s", exc)
        return 1

    orchestrator = AllocationOrchestrator(settings.points_method_id, settings.discount_unit)
    processor = orchestrator.run(orders, wallet, prioritize=args.prioritize, reporter=SummaryReporter())
    if not processor.final_allocations:
        logger.info("No payment scenarios to report.")
    return 0


def main() -> None:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(message)s", stream=sys.stderr)
    args = build_parser().parse_args()

    if args.mode == "api":
        run_api()
        return

    sys.exit(run_batch(args))


if __name__ == "__main__":
    main()
