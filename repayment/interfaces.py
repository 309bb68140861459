"""
Protocol-based interfaces for the extension points of the repayment library.

typing.Protocol gives structural subtyping: any class with the required methods
satisfies the protocol, so new loan products and calculators plug into the
engine without touching core code.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Loan(Protocol):
    """Protocol for all calculable loan products.

    Loans are data-only; calculation logic lives in Calculator implementations.
    Every loan reports the amount currently owed, which the engine uses for
    dispatch logging and callers use for display.
    """

    @property
    def amount_owed(self) -> float:
        """Outstanding amount before any repayment is applied."""
        ...


class Calculator(Protocol):
    """Protocol for loan repayment calculators.

    Each calculator handles one or more loan types and can be registered
    with the RepaymentEngine for dispatch.
    """

    def can_calculate(self, loan: Loan) -> bool:
        """Return True if this calculator handles the given loan type."""
        ...

    def calculate(self, loan: Loan) -> Any:
        """Compute the repayment result record for the loan."""
        ...
