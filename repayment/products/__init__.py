"""Products: dual-rate mortgage, credit-card balance."""

from repayment.products.credit_card import CreditCardBalance
from repayment.products.mortgage import DualRateMortgage

__all__ = ["CreditCardBalance", "DualRateMortgage"]
