"""
Result records returned by the repayment engines.

Results are plain dataclasses with currency fields already rounded to cents.
Display layers format them verbatim and never recompute.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from repayment.config import MAX_SIMULATION_MONTHS


class NotApplicable(Enum):
    """Sentinel for figures that cannot be solved (shown as "N/A")."""

    NOT_APPLICABLE = "N/A"

    def __str__(self) -> str:
        return self.value


NOT_APPLICABLE = NotApplicable.NOT_APPLICABLE

YearsRemaining = Union[float, NotApplicable, None]


@dataclass
class MortgageResult:
    """
    Dual-rate mortgage figures.
    secondary_monthly_payment / remaining_balance_after_fixed_term are None when the
    fixed term runs to (or past) the end of the loan. years_remaining is NOT_APPLICABLE
    when the payoff-period solve breaks down, None when there is no principal.
    """

    initial_monthly_payment: float
    secondary_monthly_payment: Optional[float]
    years_remaining: YearsRemaining
    remaining_balance_after_fixed_term: Optional[float]


@dataclass
class SimulationResult:
    """Outcome of a month-by-month payoff simulation."""

    months: int
    total_interest: float
    total_paid: float
    final_balance: float
    can_pay_off: bool
    growing_debt: bool
    advisory_minimum: float = 0.0

    @property
    def reached_cap(self) -> bool:
        """True when the simulation ran to the month cap without clearing the balance."""
        return self.months >= MAX_SIMULATION_MONTHS and self.final_balance > 0


@dataclass
class PayoffResult:
    """
    Credit-card payoff figures.
    used_apr reflects the default substitution; below_safe_minimum is the non-fatal
    warning raised when a chosen payment is under safe_minimum_payment.
    """

    used_apr: float
    monthly_payment: float
    payoff_months: int
    total_interest_paid: float
    total_paid: float
    final_balance: float
    can_pay_off: bool
    growing_debt: bool
    safe_minimum_payment: float
    below_safe_minimum: bool = False


@dataclass
class AprEstimate:
    """APR implied by paying a fixed amount each month until the balance clears."""

    apr: float
    months: int
    total_interest: float
    total_paid: float


@dataclass
class RepaymentBreakdown:
    """Interest vs principal split of the total paid (pie-chart data)."""

    interest: float
    principal: float

    @property
    def total(self) -> float:
        return self.interest + self.principal

    @property
    def interest_share(self) -> float:
        return self.interest / self.total if self.total else 0.0

    @property
    def principal_share(self) -> float:
        return self.principal / self.total if self.total else 0.0
