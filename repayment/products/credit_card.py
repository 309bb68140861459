"""Credit-card balance product (loan data only; calculation via RepaymentEngine)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreditCardBalance:
    """
    Outstanding credit-card balance to be paid off month by month.
    apr is an annual percentage; None or <= 0 falls back to the default APR.
    With target_years set the calculator solves the payment that clears the balance
    in that time, otherwise monthly_payment (or the safe minimum when omitted) is used.
    """

    balance: float
    apr: Optional[float] = None
    target_years: Optional[float] = None
    overpayment: float = 0.0
    monthly_payment: Optional[float] = None

    @property
    def amount_owed(self) -> float:
        return self.balance
