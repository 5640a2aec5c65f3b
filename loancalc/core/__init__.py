from .amortization import (
    compute_amortization,
    effective_rate_per_payment,
    number_of_periods,
    periodic_payment,
    validate_request,
)
from .frequency import CONTINUOUS, payment_frequency, resolve_frequency

__all__ = [
    "CONTINUOUS",
    "compute_amortization",
    "effective_rate_per_payment",
    "number_of_periods",
    "payment_frequency",
    "periodic_payment",
    "resolve_frequency",
    "validate_request",
]
