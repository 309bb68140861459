"""Repayment library: mortgage amortization, credit-card payoff simulation, and helpers."""

from repayment.calculate import LoanProduct, RepaymentResult, calculate
from repayment.calculators import BaseCalculator, CreditCardCalculator, MortgageCalculator
from repayment.calculators.mortgage_calculator import compute_mortgage
from repayment.calculators.payoff_calculator import (
    compute_payoff,
    estimate_apr,
    repayment_breakdown,
    required_payment,
    safe_minimum_payment,
    simulate_payoff,
)
from repayment.engine import RepaymentEngine, create_default_engine
from repayment.errors import InvalidInput, RepaymentError
from repayment.interfaces import Calculator, Loan
from repayment.numbers import format_currency, parse_amount, payment, round_currency
from repayment.products import CreditCardBalance, DualRateMortgage
from repayment.results import (
    NOT_APPLICABLE,
    AprEstimate,
    MortgageResult,
    NotApplicable,
    PayoffResult,
    RepaymentBreakdown,
    SimulationResult,
)

__all__ = [
    "Calculator",
    "Loan",
    "BaseCalculator",
    "MortgageCalculator",
    "CreditCardCalculator",
    "RepaymentEngine",
    "create_default_engine",
    "calculate",
    "LoanProduct",
    "RepaymentResult",
    "DualRateMortgage",
    "CreditCardBalance",
    "MortgageResult",
    "PayoffResult",
    "SimulationResult",
    "AprEstimate",
    "RepaymentBreakdown",
    "NotApplicable",
    "NOT_APPLICABLE",
    "InvalidInput",
    "RepaymentError",
    "compute_mortgage",
    "compute_payoff",
    "simulate_payoff",
    "estimate_apr",
    "required_payment",
    "safe_minimum_payment",
    "repayment_breakdown",
    "payment",
    "round_currency",
    "parse_amount",
    "format_currency",
]
