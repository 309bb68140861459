"""Calculator for dual-rate amortizing mortgages (closed-form annuity algebra)."""

from __future__ import annotations

import logging
import math
from typing import Optional

from repayment.calculators.base import BaseCalculator
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
from repayment.products.mortgage import DualRateMortgage
from repayment.results import NOT_APPLICABLE, MortgageResult, YearsRemaining

logger = logging.getLogger(__name__)


def compute_mortgage(loan: DualRateMortgage) -> MortgageResult:
    """
    Initial payment, post-switch payment, balance at the switch and years to pay off.

    Every figure comes from closed-form annuity formulas; rates are converted to
    monthly decimals once and used in that form throughout. Terms or rates large
    enough to overflow those formulas are rejected as InvalidInput.
    """
    principal, target_years, overpayment = _validate(loan)

    r1 = monthly_rate(loan.initial_rate)
    n = months(loan.loan_term_years)
    t = months(loan.fixed_term_years)
    g = months(target_years) if target_years else None

    try:
        horizon = g or n
        initial = abs(payment(principal, r1, horizon) + overpayment)

        secondary: Optional[float] = None
        remaining: Optional[float] = None
        if n - t > 0:
            r2 = monthly_rate(loan.secondary_rate)
            balance = balance_after(principal, r1, t, payment(principal, r1, horizon) + overpayment)
            secondary = abs(payment(balance, r2, n - t))
            remaining = abs(balance)

        years = _years_remaining(
            principal, r1, n, g, overpayment, loan.loan_term_years, target_years
        )
    except OverflowError as exc:
        raise InvalidInput(f"loan terms overflow the payment formulas: {exc}") from exc

    for figure in (initial, secondary, remaining):
        if figure is not None and not math.isfinite(figure):
            raise InvalidInput("loan terms overflow the payment formulas")

    logger.debug(
        f"Mortgage {principal:.2f} over {n} months: initial={initial:.2f}, "
        f"secondary={secondary}, years_remaining={years}, balance_at_switch={remaining}"
    )
    return MortgageResult(
        initial_monthly_payment=round_currency(initial),
        secondary_monthly_payment=None if secondary is None else round_currency(secondary),
        years_remaining=years,
        remaining_balance_after_fixed_term=None if remaining is None else round_currency(remaining),
    )


def balance_after(principal: float, rate: float, periods: int, level_payment: float) -> float:
    """
    Balance left after `periods` level payments at per-period `rate`.
    FV(principal) - FV(annuity of payments) = P(1+r)^t - A((1+r)^t - 1)/r.
    """
    if rate == 0:
        return principal - level_payment * periods
    growth = (1 + rate) ** periods
    return principal * growth - level_payment * (growth - 1) / rate


def solve_periods(principal: float, rate: float, level_payment: float) -> Optional[float]:
    """
    Signed period count from nper = log(1 + P*r / -A) / log(1 + r).
    None when the log argument is non-positive or the result is not finite.
    """
    arg = 1 + principal * rate / -level_payment
    if arg <= 0 or rate <= 0:
        return None
    nper = math.log(arg) / math.log(1 + rate)
    if not math.isfinite(nper):
        return None
    return nper


def _years_remaining(
    principal: float,
    r1: float,
    n: int,
    g: Optional[int],
    overpayment: float,
    loan_term_years: float,
    target_years: Optional[float],
) -> YearsRemaining:
    # Priority: target+overpayment, target, overpayment, neither.
    if principal == 0:
        return None
    if g and overpayment:
        nper = solve_periods(principal, r1, payment(principal, r1, g) + overpayment)
        if nper is None or nper < 0:
            logger.warning(
                f"Years remaining for {principal:.2f} with target {target_years}Y "
                f"and overpayment {overpayment:.2f} is not applicable"
            )
            return NOT_APPLICABLE
        return round(nper / 12, 2)
    if g:
        return target_years
    if overpayment:
        nper = solve_periods(principal, r1, payment(principal, r1, n) + overpayment)
        if nper is None:
            logger.warning(f"Overpayment {overpayment:.2f} cannot amortize {principal:.2f}")
            return NOT_APPLICABLE
        return round(abs(nper) / 12, 2)
    return loan_term_years


def _validate(loan: DualRateMortgage) -> tuple[float, Optional[float], float]:
    principal = require_positive("principal", loan.principal)
    require_positive("initial_rate", loan.initial_rate)
    require_positive("loan_term_years", loan.loan_term_years)
    require_positive("fixed_term_years", loan.fixed_term_years)
    if months(loan.fixed_term_years) < months(loan.loan_term_years):
        require_positive("secondary_rate", loan.secondary_rate)
    overpayment = require_non_negative("overpayment", loan.overpayment)
    target_years = loan.target_years
    if target_years is not None:
        if not math.isfinite(target_years) or target_years < 0:
            raise InvalidInput(f"target_years must be > 0, got {target_years!r}")
        if target_years and months(target_years) == 0:
            raise InvalidInput(f"target_years {target_years} rounds to zero months")
        target_years = target_years or None
    return principal, target_years, overpayment


class MortgageCalculator(BaseCalculator):
    """Calculator for dual-rate mortgages (fixed period, then secondary rate)."""

    loan_type = DualRateMortgage

    def calculate(self, loan: Loan) -> MortgageResult:
        assert isinstance(loan, DualRateMortgage)
        return compute_mortgage(loan)
