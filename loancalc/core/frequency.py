"""Translate the frequency options offered by the loan form into periods per year."""

from __future__ import annotations

from typing import Dict, Union

from loancalc.domain.errors import InvalidInputError

CONTINUOUS = "continuous"

FREQUENCIES: Dict[str, Union[int, str]] = {
    "annually": 1,
    "semiannually": 2,
    "quarterly": 4,
    "monthly": 12,
    "weekly": 52,
    "daily": 365,
    "continuously": CONTINUOUS,
}


def _normalize_label(label: str) -> str:
    return "".join(ch for ch in label.lower() if ch not in " -_")


def resolve_frequency(value: Union[int, str], field: str = "frequency") -> Union[int, str]:
    """Return periods per year for a label or integer, or CONTINUOUS.

    Unknown labels are rejected; nothing falls back to annual.
    """
    if isinstance(value, bool):
        raise InvalidInputError([f"{field} must be a label or a positive integer"])
    if isinstance(value, int):
        if value < 1:
            raise InvalidInputError([f"{field} must be >= 1"])
        return value

    key = _normalize_label(str(value))
    if key.isdigit():
        return resolve_frequency(int(key), field)
    if key not in FREQUENCIES:
        raise InvalidInputError([f"{field} '{value}' is not a recognised frequency"])
    return FREQUENCIES[key]


def payment_frequency(value: Union[int, str]) -> int:
    resolved = resolve_frequency(value, "paymentFrequency")
    if resolved == CONTINUOUS:
        raise InvalidInputError(["paymentFrequency cannot be continuous"])
    return int(resolved)
