"""Plain decimal rendering of integers and floating-point numbers."""

from __future__ import annotations

__all__ = ["int_to_str", "float_to_str"]


def int_to_str(value: int) -> str:
    """Render an integer as decimal digits, with a leading '-' when negative.

    Zero has no significant digits and renders as an empty string.
    """
    if value == 0:
        return ""
    return str(value)


def float_to_str(value: float, size: int) -> str:
    """Render ``value`` with ``size`` digits after the decimal point.

    The integer part is truncated toward zero and written without leading
    zeros; when it is zero no integer digits are written at all. The first
    ``size + 1`` fractional digits are extracted by truncation. If the extra
    digit is 5 or more, every kept fractional digit that is 5 or more is
    bumped by one (9 wraps to 0); smaller digits and the integer part are left
    alone. With ``size`` equal to 0 only the sign and integer digits remain.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")

    negative = value < 0
    magnitude = -value if negative else value
    whole = int(magnitude)
    head = ("-" if negative else "") + (str(whole) if whole else "")
    if size == 0:
        return head

    scale = 10 ** (size + 1)
    tail = int(magnitude * scale) - whole * scale
    digits = [tail // 10**power % 10 for power in range(size, -1, -1)]
    kept, extra = digits[:-1], digits[-1]
    if extra >= 5:
        kept = [(digit + 1) % 10 if digit >= 5 else digit for digit in kept]
    return head + "." + "".join(str(digit) for digit in kept)