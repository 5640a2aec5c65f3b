"""Fixed-rate amortization schedule.

Every period is a uniform fraction of a year. The payment is constant across
periods and the final period closes the loan at exactly zero.
"""

from __future__ import annotations

import math
import sys
from numbers import Real
from typing import List, Optional

from loancalc.domain.errors import (
    DegenerateScheduleError,
    InvalidInputError,
    NumericOverflowError,
)
from loancalc.domain.loan import AmortizationResult, LoanRequest, PeriodEntry

MAX_TERM_YEARS = 100
MAX_PAYMENTS_PER_YEAR = 365
PERIOD_TOLERANCE = 1e-6
# (1 + i)^-n below the smallest normal float leaves an interest-only payment
MAX_LOG_GROWTH = -math.log(sys.float_info.min)


def _as_float(value: object) -> Optional[float]:
    """Finite float for a real number, or None (bools and huge ints included)."""
    if not isinstance(value, Real) or isinstance(value, bool):
        return None
    try:
        converted = float(value)
    except OverflowError:
        return None
    return converted if math.isfinite(converted) else None


def _as_frequency(value: object) -> Optional[int]:
    converted = _as_float(value)
    if converted is None or not converted.is_integer():
        return None
    return int(converted)


def validate_request(request: LoanRequest) -> List[str]:
    """Collect every field-level problem with the request."""
    errors: List[str] = []

    principal = _as_float(request.principal)
    if principal is None:
        errors.append("principal must be a finite number")
    elif principal <= 0:
        errors.append("principal must be > 0")

    rate = _as_float(request.annual_rate_percent)
    if rate is None:
        errors.append("annual_rate_percent must be a finite number")
    elif rate < 0:
        errors.append("annual_rate_percent must be >= 0")

    term = _as_float(request.term_years)
    if term is None:
        errors.append("term_years must be a finite number")
    elif term <= 0:
        errors.append("term_years must be > 0")
    elif term > MAX_TERM_YEARS:
        errors.append(f"term_years must be <= {MAX_TERM_YEARS}")

    payments = _as_frequency(request.payments_per_year)
    if payments is None:
        errors.append("payments_per_year must be a finite integer")
    elif not 1 <= payments <= MAX_PAYMENTS_PER_YEAR:
        errors.append(f"payments_per_year must be between 1 and {MAX_PAYMENTS_PER_YEAR}")

    if not request.continuous_compounding:
        compounding = _as_frequency(request.compounding_per_year)
        if compounding is None:
            errors.append("compounding_per_year must be a finite integer")
        elif compounding < 1:
            errors.append("compounding_per_year must be >= 1")

    return errors


def number_of_periods(term_years: float, payments_per_year: int) -> int:
    raw = term_years * payments_per_year
    periods = int(round(raw))
    if periods < 1:
        raise DegenerateScheduleError(
            [f"term of {term_years} years at {payments_per_year} payments per year has no whole period"]
        )
    if abs(raw - periods) > PERIOD_TOLERANCE:
        raise InvalidInputError(
            [f"term of {term_years} years does not divide into whole periods at {payments_per_year} per year"]
        )
    return periods


def effective_rate_per_payment(
    annual_rate_percent: float,
    payments_per_year: int,
    compounding_per_year: int,
    continuous: bool = False,
) -> float:
    """Rate per payment period equivalent to the quoted nominal annual rate.

    Discrete compounding: (1 + r/m)^(m/p) - 1, which is exactly r/m when m == p.
    Continuous compounding: e^(r/p) - 1.
    """
    nominal = annual_rate_percent / 100.0
    if nominal == 0:
        return 0.0
    if continuous:
        return math.expm1(nominal / payments_per_year)
    if compounding_per_year == payments_per_year:
        return nominal / compounding_per_year
    return math.expm1(compounding_per_year / payments_per_year * math.log1p(nominal / compounding_per_year))


def periodic_payment(principal: float, rate: float, periods: int) -> float:
    """Level payment that retires `principal` over `periods` at `rate` per period."""
    if rate == 0:
        return principal / periods

    log_growth = periods * math.log1p(rate)
    if log_growth > MAX_LOG_GROWTH:
        raise DegenerateScheduleError(
            [f"(1 + {rate:.6g})^-{periods} underflows, so the loan never amortizes"]
        )

    # 1 - (1 + i)^-n, kept accurate for very small rates
    denominator = -math.expm1(-log_growth)
    if denominator < sys.float_info.min:
        raise DegenerateScheduleError(["payment denominator is numerically zero"])

    payment = principal * rate / denominator
    if not math.isfinite(payment):
        raise NumericOverflowError([f"payment for principal {principal} is not representable"])
    return payment


def remaining_balance(principal: float, rate: float, periods: int, paid: int) -> float:
    """Balance left after `paid` level payments.

    P * ((1+i)^n - (1+i)^k) / ((1+i)^n - 1), written with expm1 so rounding
    error does not compound from one period to the next the way
    balance * (1 + i) - payment does.
    """
    if rate == 0:
        return principal * (periods - paid) / periods
    log_step = math.log1p(rate)
    return principal * math.expm1((paid - periods) * log_step) / math.expm1(-periods * log_step)


def compute_amortization(request: LoanRequest) -> AmortizationResult:
    errors = validate_request(request)
    if errors:
        raise InvalidInputError(errors)

    principal = float(request.principal)
    payments_per_year = int(request.payments_per_year)
    compounding_per_year = payments_per_year if request.continuous_compounding else int(request.compounding_per_year)
    periods = number_of_periods(float(request.term_years), payments_per_year)
    rate = effective_rate_per_payment(
        float(request.annual_rate_percent),
        payments_per_year,
        compounding_per_year,
        continuous=request.continuous_compounding,
    )
    payment = periodic_payment(principal, rate, periods)

    schedule: List[PeriodEntry] = []
    balance = principal
    for period in range(1, periods + 1):
        interest = balance * rate
        # last period pays off whatever is left
        ending = 0.0 if period == periods else remaining_balance(principal, rate, periods, period)
        principal_paid = balance - ending
        if not math.isfinite(interest) or not math.isfinite(ending):
            raise NumericOverflowError([f"balance is not representable at period {period}"])
        schedule.append(
            PeriodEntry(
                period=period,
                beginning_balance=balance,
                interest=interest,
                principal=principal_paid,
                ending_balance=ending,
            )
        )
        balance = ending

    total_paid = payment * periods
    total_interest = total_paid - principal
    if not math.isfinite(total_paid) or not math.isfinite(total_interest):
        raise NumericOverflowError(["total paid is not representable"])

    return AmortizationResult(
        periodic_payment=payment,
        number_of_periods=periods,
        effective_rate_per_payment=rate,
        total_paid=total_paid,
        total_interest=total_interest,
        schedule=tuple(schedule),
    )
