"""Tests for the dual-rate mortgage calculator."""

import math

import pytest

from repayment.calculators.mortgage_calculator import (
    _years_remaining,
    balance_after,
    compute_mortgage,
    solve_periods,
)
from repayment.errors import InvalidInput
from repayment.products.mortgage import DualRateMortgage
from repayment.results import NOT_APPLICABLE


def _level_payment(pv: float, r: float, n: int) -> float:
    return pv * (r * (1 + r) ** n) / ((1 + r) ** n - 1)


def _reference_mortgage(**overrides) -> DualRateMortgage:
    fields = dict(
        principal=200_000,
        initial_rate=4.5,
        loan_term_years=25,
        fixed_term_years=5,
        secondary_rate=6.5,
    )
    fields.update(overrides)
    return DualRateMortgage(**fields)


def test_initial_payment_reference_scenario() -> None:
    """200k over 25Y at 4.5% (r = 0.00375, n = 300) pays 1111.66 a month."""
    result = compute_mortgage(_reference_mortgage())
    assert abs(result.initial_monthly_payment - 1111.66) < 0.01


def test_balance_at_switch_matches_month_by_month() -> None:
    """Closed-form balance after the fixed term equals a 60-month amortization loop."""
    r1 = 0.045 / 12
    pmt = _level_payment(200_000, r1, 300)
    balance = 200_000.0
    for _ in range(60):
        balance = balance * (1 + r1) - pmt
    result = compute_mortgage(_reference_mortgage())
    assert abs(result.remaining_balance_after_fixed_term - balance) < 0.01
    assert abs(balance_after(200_000, r1, 60, pmt) - balance) < 1e-6


def test_secondary_payment_amortizes_remaining_balance() -> None:
    """After the switch the balance is re-amortized at 6.5% over the remaining 240 months."""
    r1 = 0.045 / 12
    r2 = 0.065 / 12
    pmt = _level_payment(200_000, r1, 300)
    balance = balance_after(200_000, r1, 60, pmt)
    expected = _level_payment(balance, r2, 240)
    result = compute_mortgage(_reference_mortgage())
    assert abs(result.secondary_monthly_payment - expected) < 0.01
    assert result.secondary_monthly_payment > result.initial_monthly_payment


def test_no_overpayment_no_target_keeps_loan_term() -> None:
    """Without overpayment or target, years remaining is the loan term exactly."""
    for term in (10, 25, 30):
        result = compute_mortgage(_reference_mortgage(loan_term_years=term))
        assert result.years_remaining == term


def test_fixed_term_covering_loan_has_no_switch() -> None:
    """Fixed term >= loan term: no secondary payment, no balance at switch, no secondary rate needed."""
    for fixed in (25, 30):
        result = compute_mortgage(
            _reference_mortgage(fixed_term_years=fixed, secondary_rate=None)
        )
        assert result.secondary_monthly_payment is None
        assert result.remaining_balance_after_fixed_term is None
        assert result.years_remaining == 25


def test_target_sets_payment_horizon_and_years() -> None:
    """Target of 15Y: payment amortizes over 180 months, years remaining = 15."""
    result = compute_mortgage(_reference_mortgage(target_years=15))
    expected = _level_payment(200_000, 0.045 / 12, 180)
    assert abs(result.initial_monthly_payment - expected) < 0.01
    assert result.years_remaining == 15


def test_zero_target_means_no_target() -> None:
    """target_years = 0 is treated as 'not given'."""
    assert compute_mortgage(_reference_mortgage(target_years=0)) == compute_mortgage(
        _reference_mortgage()
    )


def test_overpayment_added_to_initial_payment() -> None:
    """Overpayment is paid on top of the required payment."""
    base = compute_mortgage(_reference_mortgage())
    over = compute_mortgage(_reference_mortgage(overpayment=200))
    assert abs(over.initial_monthly_payment - base.initial_monthly_payment - 200) < 0.011


def test_overpayment_shortens_payoff() -> None:
    """Overpaying 200/month clears the loan in nper = -log(1 - P*r/A) / log(1+r) months."""
    r1 = 0.045 / 12
    a = _level_payment(200_000, r1, 300) + 200
    nper = -math.log(1 - 200_000 * r1 / a) / math.log(1 + r1)
    result = compute_mortgage(_reference_mortgage(overpayment=200))
    assert abs(result.years_remaining - nper / 12) < 0.006
    assert result.years_remaining < 25


def test_overpayment_reduces_balance_at_switch() -> None:
    """Paying more during the fixed period leaves less to re-amortize."""
    base = compute_mortgage(_reference_mortgage())
    over = compute_mortgage(_reference_mortgage(overpayment=500))
    assert over.remaining_balance_after_fixed_term < base.remaining_balance_after_fixed_term
    assert over.secondary_monthly_payment < base.secondary_monthly_payment


def test_target_and_overpayment_not_applicable() -> None:
    """Target plus overpayment: the period solve comes out negative, reported as N/A."""
    result = compute_mortgage(_reference_mortgage(target_years=15, overpayment=300))
    assert result.years_remaining is NOT_APPLICABLE
    assert str(result.years_remaining) == "N/A"
    expected = _level_payment(200_000, 0.045 / 12, 180) + 300
    assert abs(result.initial_monthly_payment - expected) < 0.01


def test_solve_periods_signed_and_domain() -> None:
    """The log solve is negative for an amortizing payment and None when it cannot amortize."""
    r1 = 0.045 / 12
    a = _level_payment(200_000, r1, 300) + 200
    nper = solve_periods(200_000, r1, a)
    assert nper is not None and nper < 0
    assert abs(-nper - (-math.log(1 - 200_000 * r1 / a) / math.log(1 + r1))) < 1e-9
    assert solve_periods(200_000, 0.00375, 700.0) is None
    assert solve_periods(200_000, 0.00375, 500.0) is None


def test_years_remaining_absent_for_zero_principal() -> None:
    """No principal, nothing to solve."""
    assert _years_remaining(0, 0.00375, 300, None, 100, 25, None) is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"initial_rate": 1e10},
        {"loan_term_years": 1_000_000, "fixed_term_years": 500_000},
        {"loan_term_years": 1e308, "fixed_term_years": 5},
    ],
)
def test_overflowing_terms_raise_invalid_input(overrides: dict) -> None:
    """Rates or terms that overflow the closed forms are rejected, never raised raw."""
    with pytest.raises(InvalidInput):
        compute_mortgage(_reference_mortgage(**overrides))


def test_results_are_non_negative_and_rounded() -> None:
    """Currency fields are >= 0 and carry at most two decimals."""
    result = compute_mortgage(_reference_mortgage(overpayment=123.456))
    for value in (
        result.initial_monthly_payment,
        result.secondary_monthly_payment,
        result.remaining_balance_after_fixed_term,
    ):
        assert value >= 0
        assert round(value, 2) == value


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"principal": 0}, "principal"),
        ({"principal": -1}, "principal"),
        ({"principal": float("nan")}, "principal"),
        ({"initial_rate": 0}, "initial_rate"),
        ({"loan_term_years": 0}, "loan_term_years"),
        ({"fixed_term_years": 0}, "fixed_term_years"),
        ({"secondary_rate": None}, "secondary_rate"),
        ({"secondary_rate": -2}, "secondary_rate"),
        ({"overpayment": -10}, "overpayment"),
        ({"target_years": -5}, "target_years"),
        ({"target_years": 0.01}, "target_years"),
    ],
)
def test_invalid_input_raises(overrides: dict, field: str) -> None:
    """Missing, non-positive or non-finite required fields are rejected up front."""
    with pytest.raises(InvalidInput, match=field):
        compute_mortgage(_reference_mortgage(**overrides))
