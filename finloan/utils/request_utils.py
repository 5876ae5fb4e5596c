import math
from typing import Any, Optional, Union

Number = Union[int, float]


def parse_mobile(value: Any) -> Optional[int]:
    """Coerce a mobile number from a request body to a positive ``int``, or ``None`` if unusable."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        value = int(value.strip())
    if isinstance(value, int) and value > 0:
        return value
    return None


def parse_positive_number(value: Any) -> Optional[Number]:
    """Return ``value`` as a number if it is strictly positive, otherwise ``None``.

    Zero counts as missing, the same as an absent field.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def as_number(value: Number) -> Number:
    """Whole floats become ``int`` so JSON shows ``1000`` rather than ``1000.0``."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def format_amount(value: Any) -> str:
    """Render an amount for a message, keeping string input exactly as the client sent it."""
    if isinstance(value, str):
        return value.strip()
    return str(as_number(value))
