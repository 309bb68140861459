"""Calculator implementations for the registry-based repayment engine."""

from repayment.calculators.base import BaseCalculator
from repayment.calculators.mortgage_calculator import MortgageCalculator
from repayment.calculators.payoff_calculator import CreditCardCalculator

__all__ = [
    "BaseCalculator",
    "CreditCardCalculator",
    "MortgageCalculator",
]
