from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

MONEY_PLACES = 2


def round_money(value: float) -> float:
    """Display rounding; the recurrence itself keeps full precision."""
    rounded = round(value, MONEY_PLACES)
    # avoid rendering -0.0
    return rounded + 0.0


@dataclass(frozen=True)
class LoanRequest:
    principal: float
    annual_rate_percent: float
    term_years: float
    payments_per_year: int
    compounding_per_year: int
    continuous_compounding: bool = False


@dataclass(frozen=True)
class PeriodEntry:
    period: int
    beginning_balance: float
    interest: float
    principal: float
    ending_balance: float

    def rounded(self) -> "PeriodEntry":
        return PeriodEntry(
            period=self.period,
            beginning_balance=round_money(self.beginning_balance),
            interest=round_money(self.interest),
            principal=round_money(self.principal),
            ending_balance=round_money(self.ending_balance),
        )


@dataclass(frozen=True)
class AmortizationResult:
    periodic_payment: float
    number_of_periods: int
    effective_rate_per_payment: float
    total_paid: float
    total_interest: float
    schedule: Tuple[PeriodEntry, ...]

    def principal_series(self) -> List[float]:
        return [entry.principal for entry in self.schedule]

    def interest_series(self) -> List[float]:
        return [entry.interest for entry in self.schedule]

    def balance_series(self) -> List[float]:
        """Ending balance after each period, in period order."""
        return [entry.ending_balance for entry in self.schedule]
