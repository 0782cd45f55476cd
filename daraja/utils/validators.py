"""
Custom Validators
Validation functions for STK Push input
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Optional


def validate_amount(amount: Any) -> tuple[bool, Optional[str]]:
    """
    Validate payment amount

    Args:
        amount: Amount to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    # bool is an int subclass; True must not pass as 1
    if isinstance(amount, bool):
        return False, "Amount must be a number, got bool"

    try:
        # Convert to Decimal for precise comparison
        if isinstance(amount, str):
            amount_decimal = Decimal(amount.strip())
        elif isinstance(amount, (int, float)):
            amount_decimal = Decimal(str(amount))
        elif isinstance(amount, Decimal):
            amount_decimal = amount
        else:
            return False, f"Amount must be a number, got {type(amount).__name__}"

        if not amount_decimal.is_finite():
            return False, "Amount must be a finite number"

        # Check if positive
        if amount_decimal <= 0:
            return False, "Amount must be greater than 0"

        return True, None

    except (InvalidOperation, ValueError) as e:
        return False, f"Invalid amount format: {str(e)}"


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty once stripped"""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
