# SPDX-License-Identifier: MIT

from typing import Any

from cakecrumb.errors import ValidationError


def require_amount(amount: Any, field: str = "amount") -> int:
    """A non-negative whole number. Booleans and floats are rejected."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValidationError(field, f"must be a whole number, got {amount!r}")
    if amount < 0:
        raise ValidationError(field, f"must not be negative, got {amount}")
    return amount
