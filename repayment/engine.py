"""
Repayment engine: dispatches loan products to the calculator that handles them.

Loans are data only. Calculators are tried in registration order and the first
whose `can_calculate()` accepts the loan produces the result, so a mortgage or
card variant can be supported by registering a calculator ahead of the
built-in ones.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from repayment.calculators import BaseCalculator
from repayment.interfaces import Loan

logger = logging.getLogger(__name__)


class RepaymentEngine:
    """Ordered registry of repayment calculators."""

    def __init__(self) -> None:
        self._calculators: list[BaseCalculator] = []

    @property
    def calculators(self) -> tuple[BaseCalculator, ...]:
        return tuple(self._calculators)

    def register(self, calculator: BaseCalculator, first: bool = False) -> None:
        """Add a calculator; `first=True` puts it ahead of those already registered."""
        if first:
            self._calculators.insert(0, calculator)
        else:
            self._calculators.append(calculator)

    def calculator_for(self, loan: Loan) -> Optional[BaseCalculator]:
        return next((c for c in self._calculators if c.can_calculate(loan)), None)

    def calculate(self, loan: Loan) -> Any:
        if not isinstance(loan, Loan):
            raise TypeError(f"{type(loan).__name__} is not a loan: it has no amount_owed")
        calculator = self.calculator_for(loan)
        if calculator is None:
            raise ValueError(
                f"No calculator registered for {type(loan).__name__}. "
                "Register one with engine.register(calculator)."
            )
        logger.debug(
            f"{type(calculator).__name__} handling {type(loan).__name__} "
            f"owing {loan.amount_owed:.2f}"
        )
        return calculator.calculate(loan)


def create_default_engine() -> RepaymentEngine:
    """Engine with the mortgage and credit-card calculators registered."""
    from repayment.calculators import CreditCardCalculator, MortgageCalculator

    engine = RepaymentEngine()
    engine.register(MortgageCalculator())
    engine.register(CreditCardCalculator())
    return engine
