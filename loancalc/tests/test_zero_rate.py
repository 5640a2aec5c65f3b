from __future__ import annotations

from math import isclose

from loancalc.core.amortization import compute_amortization
from loancalc.domain.loan import LoanRequest, round_money


def test_zero_rate_splits_principal_evenly():
    """
    With no interest, every payment is principal / number of periods and nothing accrues.
    """
    request = LoanRequest(
        principal=1000.0,
        annual_rate_percent=0.0,
        term_years=1,
        payments_per_year=12,
        compounding_per_year=12,
    )

    result = compute_amortization(request)

    assert len(result.schedule) == 12
    assert result.effective_rate_per_payment == 0.0
    assert round_money(result.periodic_payment) == 83.33
    assert round_money(result.total_interest) == 0.0
    for entry in result.schedule:
        assert entry.interest == 0.0
        assert isclose(entry.principal, 1000.0 / 12, abs_tol=1e-9)
    assert result.schedule[-1].ending_balance == 0.0


def test_zero_rate_ignores_compounding_choice():
    quarterly = LoanRequest(
        principal=1200.0,
        annual_rate_percent=0.0,
        term_years=2,
        payments_per_year=12,
        compounding_per_year=4,
    )
    continuous = LoanRequest(
        principal=1200.0,
        annual_rate_percent=0.0,
        term_years=2,
        payments_per_year=12,
        compounding_per_year=1,
        continuous_compounding=True,
    )

    assert compute_amortization(quarterly).periodic_payment == 50.0
    assert compute_amortization(continuous).periodic_payment == 50.0


def test_tiny_rate_approaches_zero_rate_payment():
    request = LoanRequest(
        principal=1000.0,
        annual_rate_percent=1e-9,
        term_years=1,
        payments_per_year=12,
        compounding_per_year=12,
    )

    result = compute_amortization(request)

    assert isclose(result.periodic_payment, 1000.0 / 12, rel_tol=1e-9)
    assert all(entry.interest < 1e-6 for entry in result.schedule)
