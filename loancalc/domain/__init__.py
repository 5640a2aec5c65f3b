from .errors import (
    AmortizationError,
    DegenerateScheduleError,
    InvalidInputError,
    NumericOverflowError,
)
from .loan import AmortizationResult, LoanRequest, PeriodEntry, round_money

__all__ = [
    "AmortizationError",
    "AmortizationResult",
    "DegenerateScheduleError",
    "InvalidInputError",
    "LoanRequest",
    "NumericOverflowError",
    "PeriodEntry",
    "round_money",
]
