"""Exceptions raised by the repayment engines."""


class RepaymentError(ValueError):
    """Base class for repayment calculation errors."""


class InvalidInput(RepaymentError):
    """A required field is missing, non-positive or non-finite.

    Raised before any computation starts. Non-fatal outcomes (divergent debt,
    the 600-month cap, an unsolvable years-remaining figure) are reported as
    result flags instead.
    """
