"""Dual-rate mortgage product (loan data only; calculation via RepaymentEngine)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class DualRateMortgage:
    """
    Amortizing mortgage with an initial fixed-rate period followed by a secondary rate.
    Rates are annual percentages (4.5 = 4.5%), terms are in years.
    overpayment is an extra fixed amount paid every month; target_years asks for the
    payment needed to clear the loan early (None or 0 = no target).
    """

    principal: float
    initial_rate: float
    loan_term_years: float
    fixed_term_years: float
    secondary_rate: Optional[float] = None
    overpayment: float = 0.0
    target_years: Optional[float] = None

    @property
    def amount_owed(self) -> float:
        return self.principal
