"""Integer arithmetic, digit manipulation and Roman numerals."""

from __future__ import annotations

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)

_ROMAN_STEPS = (
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
)
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``, keeping its sign.

    A result outside the signed 32-bit range gives 0.
    """
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same forwards and backwards; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def int_to_roman(num: int) -> str:
    """Write a non-negative integer in Roman numerals; 0 gives the empty string.

    Raises ValueError for negative numbers.
    """
    if num < 0:
        raise ValueError("Roman numerals cannot express negative numbers")
    parts = []
    for symbol, value in _ROMAN_STEPS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s: str) -> int:
    """Read a Roman numeral, where a smaller symbol before a larger one subtracts.

    Raises ValueError for characters that are not Roman symbols.
    """
    try:
        values = [_ROMAN_VALUES[char] for char in s]
    except KeyError as exc:
        raise ValueError(f"not a Roman numeral symbol: {exc.args[0]!r}") from None
    total = 0
    index = 0
    while index < len(values):
        current = values[index]
        if index + 1 < len(values) and current < values[index + 1]:
            total += values[index + 1] - current
            index += 2
        else:
            total += current
            index += 1
    return total


def divide(dividend: int, divisor: int) -> int:
    """Divide with truncation toward zero, clamped to the signed 32-bit range.

    Raises ZeroDivisionError when ``divisor`` is 0.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return max(_INT_MIN, min(_INT_MAX, quotient))


def _check_digits(num: str) -> None:
    if not (num and num.isascii() and num.isdigit()):
        raise ValueError(f"not a non-negative decimal number: {num!r}")


def multiply_strings(num1: str, num2: str) -> str:
    """Multiply two non-negative numbers given as decimal strings.

    Raises ValueError when either string is not made of decimal digits.
    """
    _check_digits(num1)
    _check_digits(num2)
    return str(int(num1) * int(num2))


def my_pow(x: float, n: int) -> float:
    """Raise ``x`` to the integer power ``n`` by repeated squaring.

    Raises ZeroDivisionError for a zero base with a negative exponent.
    """
    exponent = n
    base = float(x)
    if exponent < 0:
        base = 1 / base
        exponent = -exponent
    result = 1.0
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result