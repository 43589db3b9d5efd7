"""Small numeric helpers shared across the game."""

from __future__ import annotations

from collections.abc import Iterable

UNDEFINED = -1
INT_MIN = -(2**31)
INT_MAX_DIGITS = 10  # len(str(2**31 - 1))

_DIGIT_LIMITS = tuple(10**power for power in range(1, 10))
_ODD_DIGIT_LIMITS = (10**2, 10**4, 10**6, 10**8)
_EVEN_DIGIT_LIMITS = (10**1, 10**3, 10**5, 10**7)


def _count_below(n: int, limits: tuple[int, ...]) -> int:
    """Return the 1-based position of the first limit above ``n``."""
    return next(
        (position for position, limit in enumerate(limits, start=1) if n < limit),
        len(limits) + 1,
    )


def get_digits(n: int) -> int:
    """Number of decimal digits of a non-negative 32-bit integer."""
    return _count_below(n, _DIGIT_LIMITS)


def get_digits_odd(n: int) -> int:
    """Number of digits counted in pairs, rounding an odd leftover up."""
    return _count_below(n, _ODD_DIGIT_LIMITS)


def get_digits_even(n: int) -> int:
    """Number of digits counted in pairs after the leading digit, plus one."""
    return _count_below(n, _EVEN_DIGIT_LIMITS)


def int_arr_max(values: Iterable[int]) -> int:
    """Largest value, or the smallest 32-bit integer when there are none."""
    return max(values, default=INT_MIN)