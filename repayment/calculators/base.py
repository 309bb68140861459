"""Base class for repayment calculators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Optional

from repayment.interfaces import Loan


class BaseCalculator(ABC):
    """Computes the result record for one kind of loan.

    Set `loan_type` to accept instances of that product, or override
    can_calculate() for anything more selective.
    """

    loan_type: ClassVar[Optional[type]] = None

    def can_calculate(self, loan: Loan) -> bool:
        return self.loan_type is not None and isinstance(loan, self.loan_type)

    @abstractmethod
    def calculate(self, loan: Loan) -> Any:
        ...
