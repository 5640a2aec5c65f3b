"""Failures raised by the amortization engine."""

from __future__ import annotations

from typing import List


class AmortizationError(ValueError):
    kind = "amortization_error"

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class InvalidInputError(AmortizationError):
    """A request field is out of range before any computation starts."""

    kind = "invalid_input"


class DegenerateScheduleError(AmortizationError):
    """Fields are individually valid but no usable schedule exists for them."""

    kind = "degenerate_schedule"


class NumericOverflowError(AmortizationError):
    """Payments or balances left the range of representable floats."""

    kind = "numeric_overflow"
