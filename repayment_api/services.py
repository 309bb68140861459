"""Service layer: convert GraphQL inputs to repayment products and run the calculators."""

from __future__ import annotations

import logging
from typing import Optional

from repayment.calculate import calculate
from repayment.calculators.payoff_calculator import estimate_apr, repayment_breakdown
from repayment.products.credit_card import CreditCardBalance
from repayment.products.mortgage import DualRateMortgage
from repayment.results import NotApplicable

from repayment_api.types import (
    AprEstimateResult,
    Breakdown,
    CreditCardInput,
    MortgageCalculation,
    MortgageInput,
    PayoffCalculation,
)

logger = logging.getLogger(__name__)


def mortgage_from_input(m: MortgageInput) -> DualRateMortgage:
    """Build DualRateMortgage from GraphQL MortgageInput."""
    return DualRateMortgage(
        principal=m.principal,
        initial_rate=m.initial_rate,
        loan_term_years=m.loan_term_years,
        fixed_term_years=m.fixed_term_years,
        secondary_rate=m.secondary_rate,
        overpayment=m.overpayment,
        target_years=m.target_years,
    )


def card_from_input(c: CreditCardInput) -> CreditCardBalance:
    """Build CreditCardBalance from GraphQL CreditCardInput."""
    return CreditCardBalance(
        balance=c.balance,
        apr=c.apr,
        target_years=c.target_years,
        overpayment=c.overpayment,
        monthly_payment=c.monthly_payment,
    )


def calculate_mortgage(loan: MortgageInput) -> MortgageCalculation:
    """Run the mortgage calculator; N/A years remaining maps to null + applicable=false."""
    result = calculate(mortgage_from_input(loan))
    applicable = not isinstance(result.years_remaining, NotApplicable)
    logger.info(
        f"Mortgage {loan.principal:.2f} over {loan.loan_term_years}Y: "
        f"initial payment {result.initial_monthly_payment:.2f}"
    )
    return MortgageCalculation(
        initial_monthly_payment=result.initial_monthly_payment,
        secondary_monthly_payment=result.secondary_monthly_payment,
        years_remaining=result.years_remaining if applicable else None,
        years_remaining_applicable=applicable,
        remaining_balance_after_fixed_term=result.remaining_balance_after_fixed_term,
    )


def simulate_card_payoff(card: CreditCardInput) -> PayoffCalculation:
    """Run the credit-card calculator and attach the interest/principal breakdown."""
    result = calculate(card_from_input(card))
    split = repayment_breakdown(result)
    logger.info(
        f"Card {card.balance:.2f} at {result.used_apr}% APR: "
        f"{result.payoff_months} months, can_pay_off={result.can_pay_off}"
    )
    return PayoffCalculation(
        used_apr=result.used_apr,
        monthly_payment=result.monthly_payment,
        payoff_months=result.payoff_months,
        total_interest_paid=result.total_interest_paid,
        total_paid=result.total_paid,
        final_balance=result.final_balance,
        can_pay_off=result.can_pay_off,
        growing_debt=result.growing_debt,
        safe_minimum_payment=result.safe_minimum_payment,
        below_safe_minimum=result.below_safe_minimum,
        breakdown=Breakdown(
            interest=split.interest,
            principal=split.principal,
            interest_share=split.interest_share,
            principal_share=split.principal_share,
        ),
    )


def estimate_card_apr(
    balance: float, monthly_payment: float, months: int
) -> Optional[AprEstimateResult]:
    """Estimate the APR implied by a payment; None when it cannot clear the balance."""
    estimate = estimate_apr(balance, monthly_payment, months)
    if estimate is None:
        logger.info(f"Payment {monthly_payment:.2f} cannot clear {balance:.2f} in {months} months")
        return None
    return AprEstimateResult(
        apr=estimate.apr,
        months=estimate.months,
        total_interest=estimate.total_interest,
        total_paid=estimate.total_paid,
    )
