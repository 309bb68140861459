"""
Shared numeric helpers: the annuity payment formula, rate/period conversions,
currency rounding, and the parse/format contract used at the UI boundary.

Conventions:
- Rates passed to `payment()` are **per-period decimals** (e.g. 0.00375 for
  4.5% a year paid monthly). Use `monthly_rate()` to convert annual percentages.
- Results are rounded to cents by the engines (`round_currency`) so repeated
  formatting downstream is deterministic.
"""

from __future__ import annotations

import math
import re
from typing import Optional

from repayment.config import CURRENCY_DECIMALS
from repayment.errors import InvalidInput

_NON_NUMERIC = re.compile(r"[^\d.]")


def payment(pv: float, rate: float, nper: float) -> float:
    r"""
    Level payment that amortizes `pv` over `nper` periods at per-period `rate`.

    payment = rate * pv / (1 - (1 + rate)^(-nper)), and pv / nper when rate == 0.
    """
    if not nper or nper <= 0 or not math.isfinite(nper):
        raise InvalidInput(f"nper must be a positive number of periods, got {nper}")
    if rate == 0:
        return pv / nper
    return rate * pv / (1 - (1 + rate) ** -nper)


def monthly_rate(annual_rate_percent: float) -> float:
    """Annual percentage (e.g. 4.5) to monthly decimal rate (0.00375)."""
    return annual_rate_percent / 100 / 12


def months(years: float) -> int:
    """Year count to whole months."""
    total = years * 12
    if not math.isfinite(total):
        raise InvalidInput(f"year count {years!r} is out of range")
    return int(round(total))


def round_currency(value: float) -> float:
    """Round to cents. Negative zero is normalised to 0.0."""
    return round(value, CURRENCY_DECIMALS) + 0.0


def require_positive(name: str, value: Optional[float]) -> float:
    """Return value if it is a finite number > 0, else raise InvalidInput."""
    if value is None or not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{name} must be a positive number, got {value!r}")
    return value


def require_non_negative(name: str, value: Optional[float]) -> float:
    """Optional amounts (overpayments): None becomes 0, negatives are rejected."""
    if value is None:
        return 0.0
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(f"{name} must be >= 0, got {value!r}")
    return value


def parse_amount(text: Optional[str]) -> Optional[float]:
    """
    Parse a user-typed amount such as "£200,000.50" or "4.5%".

    Everything except digits and "." is stripped first. Blank input means the
    field was left empty and returns None.
    """
    if text is None:
        return None
    cleaned = _NON_NUMERIC.sub("", text)
    if not cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        raise InvalidInput(f"cannot parse amount from {text!r}") from None


def format_currency(value: float, symbol: str = "") -> str:
    """Two decimals with thousands separators, e.g. format_currency(1111.66, "£") -> "£1,111.66"."""
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.{CURRENCY_DECIMALS}f}"
