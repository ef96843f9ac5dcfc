"""
Amount Handling Module

Converts caller-supplied amounts to exact Decimal values. Amounts are never
rounded here; rounding is left to display formatting. NEVER uses float for
monetary values: floats are routed through str().
"""

from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidArgumentError

AmountLike = Union[Decimal, int, float, str]


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert a value to an exact Decimal amount.
    
    Args:
        value: Decimal, int, float or numeric string
        
    Returns:
        Decimal with the value's full precision
        
    Raises:
        InvalidArgumentError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidArgumentError(f"Invalid amount: {value!r}") from None
    
    if not value.is_finite():
        raise InvalidArgumentError(f"Invalid amount: {value!r}")
    
    return value


def to_positive_amount(value: AmountLike) -> Decimal:
    """Convert a value with to_amount() and require it to be greater than zero"""
    amount = to_amount(value)
    if amount <= 0:
        raise InvalidArgumentError("Amount must be greater than zero")
    return amount


def parse_amount(text: str) -> Decimal:
    """Parse free-text input such as '1,250.50' into a positive amount"""
    if text is None or not text.strip():
        raise InvalidArgumentError("Amount cannot be empty")
    return to_positive_amount(text.strip().replace(",", ""))
