"""GraphQL types for the repayment API."""

from __future__ import annotations

from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class MortgageInput:
    """Dual-rate mortgage: rates are annual percentages, terms in years."""

    principal: float
    initial_rate: float
    loan_term_years: float
    fixed_term_years: float
    secondary_rate: Optional[float] = None
    overpayment: float = 0.0
    target_years: Optional[float] = None


@strawberry.input
class CreditCardInput:
    """Credit-card balance. APR defaults to 25% when omitted or <= 0."""

    balance: float
    apr: Optional[float] = None
    target_years: Optional[float] = None
    overpayment: float = 0.0
    monthly_payment: Optional[float] = None


# --- Output types (response payloads) ---


@strawberry.type
class MortgageCalculation:
    """Mortgage figures. yearsRemaining is null when not applicable (see yearsRemainingApplicable)."""

    initial_monthly_payment: float
    secondary_monthly_payment: Optional[float] = None
    years_remaining: Optional[float] = None
    years_remaining_applicable: bool = True
    remaining_balance_after_fixed_term: Optional[float] = None


@strawberry.type
class Breakdown:
    """Interest vs principal split of the total paid."""

    interest: float
    principal: float
    interest_share: float
    principal_share: float


@strawberry.type
class PayoffCalculation:
    """Credit-card payoff figures and advisory flags."""

    used_apr: float
    monthly_payment: float
    payoff_months: int
    total_interest_paid: float
    total_paid: float
    final_balance: float
    can_pay_off: bool
    growing_debt: bool
    safe_minimum_payment: float
    below_safe_minimum: bool
    breakdown: Breakdown


@strawberry.type
class AprEstimateResult:
    """APR implied by a fixed monthly payment over a number of months."""

    apr: float
    months: int
    total_interest: float
    total_paid: float
