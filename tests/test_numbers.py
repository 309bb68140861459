"""Tests for the payment formula and parse/format helpers."""

import pytest

from repayment.errors import InvalidInput
from repayment.numbers import (
    format_currency,
    monthly_rate,
    months,
    parse_amount,
    payment,
    round_currency,
)


def test_payment_matches_annuity_formula() -> None:
    """payment = pv * r(1+r)^n / ((1+r)^n - 1), the level-pay annuity."""
    r = 0.05 / 2
    n = 2
    expected = 1000.0 * (r * (1 + r) ** n) / ((1 + r) ** n - 1)
    assert abs(payment(1000.0, r, n) - expected) < 1e-9


def test_payment_zero_rate_is_straight_line() -> None:
    """Zero rate: payment = pv / nper."""
    for nper in (1, 12, 300):
        assert payment(12_000.0, 0.0, nper) == 12_000.0 / nper


def test_payment_repeatable() -> None:
    """Same arguments, same answer: no hidden state."""
    assert payment(200_000, 0.00375, 300) == payment(200_000, 0.00375, 300)


def test_payment_zero_periods_raises() -> None:
    """nper == 0 is rejected instead of returning inf/NaN."""
    with pytest.raises(InvalidInput, match="nper"):
        payment(1000.0, 0.01, 0)
    with pytest.raises(InvalidInput, match="nper"):
        payment(1000.0, 0.0, 0)


def test_rate_and_period_conversions() -> None:
    """4.5% annual -> 0.00375 monthly; 2.5 years -> 30 months."""
    assert abs(monthly_rate(4.5) - 0.00375) < 1e-15
    assert months(25) == 300
    assert months(2.5) == 30


def test_parse_amount_strips_separators_and_symbols() -> None:
    """Thousands separators and currency symbols are ignored."""
    assert parse_amount("£200,000.50") == 200_000.5
    assert parse_amount("4.5%") == 4.5
    assert parse_amount("1,000") == 1000.0


def test_parse_amount_blank_is_none() -> None:
    """An empty field means 'not given'."""
    assert parse_amount("") is None
    assert parse_amount("£") is None
    assert parse_amount(None) is None


def test_parse_amount_garbage_raises() -> None:
    """More than one decimal point cannot be parsed."""
    with pytest.raises(InvalidInput, match="cannot parse"):
        parse_amount("1.2.3")


def test_format_currency() -> None:
    """Two decimals, comma thousands separators, optional symbol."""
    assert format_currency(1_111.655) in ("1,111.66", "1,111.65")
    assert format_currency(1_234_567.891, "£") == "£1,234,567.89"
    assert format_currency(0) == "0.00"
    assert format_currency(-5, "£") == "-£5.00"


def test_round_currency() -> None:
    """Rounded to cents, no negative zero."""
    assert round_currency(229.1666) == 229.17
    assert round_currency(-0.001) == 0.0
    assert str(round_currency(-0.001)) == "0.0"
