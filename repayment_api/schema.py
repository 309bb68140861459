"""GraphQL schema: mortgage and credit-card repayment queries."""

from typing import Optional

import strawberry

from repayment_api.services import (
    calculate_mortgage,
    estimate_card_apr,
    simulate_card_payoff,
)
from repayment_api.types import (
    AprEstimateResult,
    CreditCardInput,
    MortgageCalculation,
    MortgageInput,
    PayoffCalculation,
)

API_VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def calculate_mortgage(self, loan: MortgageInput) -> MortgageCalculation:
        """Dual-rate mortgage payments, balance at the rate switch and years remaining."""
        return calculate_mortgage(loan)

    @strawberry.field
    def simulate_payoff(self, card: CreditCardInput) -> PayoffCalculation:
        """Credit-card payoff simulation (600-month cap, divergence detection)."""
        return simulate_card_payoff(card)

    @strawberry.field
    def estimate_apr(
        self, balance: float, monthly_payment: float, months: int
    ) -> Optional[AprEstimateResult]:
        """APR implied by paying monthly_payment for months until the balance clears."""
        return estimate_card_apr(balance, monthly_payment, months)


schema = strawberry.Schema(query=Query)
