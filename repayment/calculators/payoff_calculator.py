"""Calculator for credit-card style balances (month-by-month payoff simulation)."""

from __future__ import annotations

import logging
import math
from typing import Optional

from repayment.calculators.base import BaseCalculator
from repayment.config import (
    APR_SEARCH_ITERATIONS,
    APR_SEARCH_MAX_MONTHLY_RATE,
    APR_SEARCH_MAX_MONTHS,
    BALANCE_TOLERANCE,
    DEFAULT_APR_PERCENT,
    DIVERGENCE_MONTHS,
    MAX_SIMULATION_MONTHS,
    MINIMUM_PAYMENT_FLOOR,
    MINIMUM_PAYMENT_PRINCIPAL_SHARE,
)
from repayment.errors import InvalidInput
from repayment.interfaces import Loan
from repayment.numbers import (
    monthly_rate,
    months,
    payment,
    require_non_negative,
    require_positive,
    round_currency,
)
from repayment.products.credit_card import CreditCardBalance
from repayment.results import (
    AprEstimate,
    PayoffResult,
    RepaymentBreakdown,
    SimulationResult,
)

logger = logging.getLogger(__name__)


def simulate_payoff(
    principal: float,
    annual_rate: float,
    monthly_payment: float,
    overpayment: float = 0.0,
    target_months: Optional[int] = None,
) -> SimulationResult:
    """
    Simulate interest accrual and payments month by month.

    Stops when the balance clears, the 600-month cap is hit, the payment is
    non-positive, target_months is reached, or the balance grows for three
    months in a row. The target check runs before the divergence guard.
    """
    rate = monthly_rate(annual_rate)
    balance = principal
    elapsed = 0
    total_interest = 0.0
    growth_streak = 0
    advisory_minimum = 0.0

    while elapsed < MAX_SIMULATION_MONTHS and balance > 0:
        previous = balance
        interest = balance * rate
        total_interest += interest
        balance += interest

        # Reference only: never changes the simulated payment.
        advisory_minimum = max(
            MINIMUM_PAYMENT_FLOOR, interest + balance * MINIMUM_PAYMENT_PRINCIPAL_SHARE
        )

        paid = monthly_payment + overpayment
        if paid <= 0:
            break
        balance = max(0.0, balance - paid)
        if balance < BALANCE_TOLERANCE:
            balance = 0.0
        elapsed += 1

        if target_months and elapsed >= target_months:
            break

        if balance > previous:
            growth_streak += 1
            if growth_streak >= DIVERGENCE_MONTHS:
                logger.debug(f"Balance grew {growth_streak} months in a row; stopping at month {elapsed}")
                break
        else:
            growth_streak = 0

    growing_debt = balance > principal
    return SimulationResult(
        months=elapsed,
        total_interest=round_currency(total_interest),
        total_paid=round_currency(principal + total_interest),
        final_balance=round_currency(balance),
        can_pay_off=balance == 0 and not growing_debt,
        growing_debt=growing_debt,
        advisory_minimum=round_currency(advisory_minimum),
    )


def safe_minimum_payment(balance: float, rate: float) -> float:
    """Payment floor below which debt is likely to grow: max(15, balance * (r + 2.5%))."""
    return max(MINIMUM_PAYMENT_FLOOR, balance * (rate + MINIMUM_PAYMENT_PRINCIPAL_SHARE))


def required_payment(balance: float, rate: float, term_months: int) -> float:
    """Level payment that clears `balance` in `term_months` (balance / months at zero rate)."""
    return payment(balance, rate, term_months)


def compute_payoff(card: CreditCardBalance) -> PayoffResult:
    """
    Pick the monthly payment for a card balance and simulate paying it off.

    With a target the payment is solved in closed form; otherwise the user's fixed
    payment or, failing that, the safe minimum is used. The APR defaults to 25%
    when missing or non-positive, and the rate actually used is reported.
    """
    balance = require_positive("balance", card.balance)
    overpayment = require_non_negative("overpayment", card.overpayment)
    apr = _used_apr(card.apr)
    rate = monthly_rate(apr)

    target_months = None
    if card.target_years is not None:
        if not math.isfinite(card.target_years) or card.target_years < 0:
            raise InvalidInput(f"target_years must be > 0, got {card.target_years!r}")
        if card.target_years:
            target_months = months(card.target_years)
            if target_months <= 0:
                raise InvalidInput(f"target_years {card.target_years} rounds to zero months")

    safe_minimum = safe_minimum_payment(balance, rate)
    below_safe_minimum = False
    if target_months:
        chosen = required_payment(balance, rate, target_months)
    elif card.monthly_payment is not None:
        chosen = require_non_negative("monthly_payment", card.monthly_payment)
        below_safe_minimum = chosen < safe_minimum
    else:
        chosen = safe_minimum

    if below_safe_minimum:
        logger.warning(
            f"Payment {chosen:.2f} is below the safe minimum {safe_minimum:.2f}; debt may grow"
        )

    sim = simulate_payoff(balance, apr, chosen, overpayment, target_months)
    if sim.growing_debt:
        logger.warning(f"Balance {balance:.2f} at {apr}% APR grows to {sim.final_balance:.2f}")
    logger.debug(
        f"Card {balance:.2f} at {apr}% APR paying {chosen:.2f}: "
        f"{sim.months} months, interest={sim.total_interest:.2f}"
    )

    return PayoffResult(
        used_apr=apr,
        monthly_payment=round_currency(chosen),
        payoff_months=sim.months,
        total_interest_paid=sim.total_interest,
        total_paid=sim.total_paid,
        final_balance=sim.final_balance,
        can_pay_off=sim.can_pay_off,
        growing_debt=sim.growing_debt,
        safe_minimum_payment=round_currency(safe_minimum),
        below_safe_minimum=below_safe_minimum,
    )


def estimate_apr(balance: float, monthly_payment: float, term_months: int) -> Optional[AprEstimate]:
    """
    Estimate the APR implied by paying `monthly_payment` until `balance` clears in
    `term_months` months.

    Bisection on the monthly rate over [0, 5%] (0-60% APR). Each candidate rate runs a
    strict payoff simulation: a payment that no longer covers the month's interest,
    or a balance still owed after `term_months`, means that rate is too high.
    Returns None when the payment cannot clear the balance in time even at 0%.
    """
    require_positive("balance", balance)
    require_positive("monthly_payment", monthly_payment)
    if term_months <= 0:
        raise InvalidInput(f"term_months must be positive, got {term_months}")
    limit = min(term_months, APR_SEARCH_MAX_MONTHS)

    best = _strict_payoff(balance, 0.0, monthly_payment, limit)
    if best is None:
        return None
    best_rate = 0.0

    low, high = 0.0, APR_SEARCH_MAX_MONTHLY_RATE
    for _ in range(APR_SEARCH_ITERATIONS):
        mid = (low + high) / 2
        outcome = _strict_payoff(balance, mid, monthly_payment, limit)
        if outcome is None:
            high = mid
        else:
            low = mid
            best, best_rate = outcome, mid

    elapsed, interest = best
    return AprEstimate(
        apr=round(best_rate * 12 * 100, 2),
        months=elapsed,
        total_interest=round_currency(interest),
        total_paid=round_currency(balance + interest),
    )


def repayment_breakdown(result: PayoffResult) -> RepaymentBreakdown:
    """Interest vs principal split of the total paid."""
    return RepaymentBreakdown(
        interest=result.total_interest_paid,
        principal=round_currency(result.total_paid - result.total_interest_paid),
    )


def _strict_payoff(
    principal: float, rate: float, level_payment: float, max_months: int
) -> Optional[tuple[int, float]]:
    """(months, total interest) to clear principal, or None if it never clears."""
    balance = principal
    elapsed = 0
    total_interest = 0.0
    while balance > BALANCE_TOLERANCE and elapsed < max_months:
        interest = balance * rate
        principal_paid = level_payment - interest
        if principal_paid <= 0:
            return None
        balance -= principal_paid
        total_interest += interest
        elapsed += 1
    if balance > BALANCE_TOLERANCE:
        return None
    return elapsed, total_interest


def _used_apr(apr: Optional[float]) -> float:
    if apr is None or apr <= 0:
        return DEFAULT_APR_PERCENT
    if not math.isfinite(apr):
        raise InvalidInput(f"apr must be a finite percentage, got {apr!r}")
    return apr


class CreditCardCalculator(BaseCalculator):
    """Calculator for credit-card balances (simulated month-by-month payoff)."""

    loan_type = CreditCardBalance

    def calculate(self, loan: Loan) -> PayoffResult:
        assert isinstance(loan, CreditCardBalance)
        return compute_payoff(loan)
