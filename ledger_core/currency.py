"""
Money Handling Module

Converts caller-supplied amounts to Decimal with two-place precision.
NEVER uses float for monetary values; floats are converted through str.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Union

from .exceptions import InvalidAmountError

# Set global decimal context for financial precision
getcontext().prec = 28

PRECISION = 2
ZERO = Decimal('0.00')
# Largest amount or balance the ledger holds; keeps every sum well inside prec
MAX_AMOUNT = Decimal('999999999999999999.99')

AmountLike = Union[Decimal, int, float, str]


def quantize(value: Decimal) -> Decimal:
    """Round a Decimal to ledger precision"""
    return value.quantize(Decimal('0.1') ** PRECISION, rounding=ROUND_HALF_UP)


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert a caller-supplied value to a ledger amount

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal rounded to ledger precision (sign preserved)

    Raises:
        InvalidAmountError: If the value is not a finite number
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmountError(f"Cannot convert '{value}' to an amount")
    else:
        raise InvalidAmountError(f"Amount must be a number, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")

    if abs(amount) > MAX_AMOUNT:
        raise InvalidAmountError(f"Amount exceeds the maximum of {MAX_AMOUNT}")

    try:
        return quantize(amount)
    except InvalidOperation:
        raise InvalidAmountError(f"Amount {value!r} cannot be represented")


def format_amount(amount: Decimal) -> str:
    """Format for display"""
    if amount < 0:
        return f"-${-amount:,.{PRECISION}f}"
    return f"${amount:,.{PRECISION}f}"
