"""
Calculation entrypoint.

Most callers only need `calculate(loan)`, which delegates to a default
`RepaymentEngine`. Advanced callers can build and configure their own engine.
"""

from typing import TypeAlias, overload

from repayment.engine import create_default_engine
from repayment.products.credit_card import CreditCardBalance
from repayment.products.mortgage import DualRateMortgage
from repayment.results import MortgageResult, PayoffResult


LoanProduct: TypeAlias = DualRateMortgage | CreditCardBalance
RepaymentResult: TypeAlias = MortgageResult | PayoffResult

_default_engine = create_default_engine()


@overload
def calculate(loan: DualRateMortgage) -> MortgageResult: ...


@overload
def calculate(loan: CreditCardBalance) -> PayoffResult: ...


def calculate(loan: LoanProduct) -> RepaymentResult:
    """Return the repayment result for a loan (via default registry-based engine)."""
    return _default_engine.calculate(loan)
