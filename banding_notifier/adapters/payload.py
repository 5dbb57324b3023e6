"""Payload adapter functions.

Mental model refresher:
- This is an adapter/edge module.
- It translates the submitted form body into the one value the rest of the
  package cares about: the cleaned, digits-only phone number.
- It validates shape only; it does not decide which channels run.
"""

from __future__ import annotations

import re
from typing import Any

from ..config import DEFAULT_MIN_DIGITS
from ..types import Payload

_NON_DIGITS = re.compile(r"\D")


class InvalidNumberError(ValueError):
    """Raised when the submitted number is missing or too short."""

    def __init__(self, min_digits: int) -> None:
        super().__init__(f"Nomor tidak valid (minimal {min_digits} digit angka).")
        self.min_digits = min_digits


def clean_phone_number(value: Any) -> str | None:
    """Strip every non-digit character; `None` when nothing usable remains."""
    if value is None or value == "":
        return None
    # JSON numbers may arrive as floats; 628123456789.0 must not gain a digit.
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    digits = _NON_DIGITS.sub("", str(value))
    return digits or None


def parse_submission(payload: Payload | None, *, min_digits: int = DEFAULT_MIN_DIGITS) -> str:
    """Return the cleaned `nomor` from a request body or raise `InvalidNumberError`."""
    nomor = (payload or {}).get("nomor")
    cleaned = clean_phone_number(nomor)
    if cleaned is None or len(cleaned) < min_digits:
        raise InvalidNumberError(min_digits)
    return cleaned
