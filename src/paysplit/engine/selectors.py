from paysplit.domain.models import PaymentScenario


def rank_scenarios(scenarios: list[PaymentScenario]) -> list[PaymentScenario]:
    # Stable sort: among exact ties the earliest generated scenario stays first.
    return sorted(scenarios, key=lambda item: (item.discount_value, item.uses_points), reverse=True)
