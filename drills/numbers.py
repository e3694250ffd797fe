"""Exercises on single integers."""

from __future__ import annotations

from math import isqrt
from typing import Sequence

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def _digits(n: int) -> list[int]:
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the decimal digits of ``n`` minus their sum."""
    product = 1
    total = 0
    for digit in _digits(n):
        product *= digit
        total += digit
    return product - total


def hamming_weight(n: int) -> int:
    """Count the set bits of a non-negative ``n``; other values give 0."""
    count = 0
    while n > 0:
        count += n & 1
        n >>= 1
    return count


def is_power_of_two(n: int) -> bool:
    """Tell whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def colored_cells(n: int) -> int:
    """Return the number of cells coloured after ``n`` minutes."""
    return 2 * n * n - 2 * n + 1


def is_ugly(n: int) -> bool:
    """Tell whether ``n`` is positive with no prime factors besides 2, 3 and 5."""
    if n <= 0:
        return False
    for factor in (2, 3, 5):
        while n % factor == 0:
            n //= factor
    return n == 1


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by ``m`` minus the sum of those that are."""
    return sum(-i if i % m == 0 else i for i in range(1, n + 1))


def triangle_type(nums: Sequence[int]) -> str:
    """Classify the triangle whose sides are the first three values of ``nums``."""
    a, b, c, *_ = nums
    if a + b <= c or a + c <= b or b + c <= a:
        return "none"
    if a == b == c:
        return "equilateral"
    if a == b or b == c or a == c:
        return "isosceles"
    return "scalene"


def is_perfect_square(num: int) -> bool:
    """Tell whether ``num`` is the square of an integer."""
    return num >= 0 and isqrt(num) ** 2 == num


def my_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError(f"square root of a negative number: {x}")
    return isqrt(x)


def reverse_integer(x: int) -> int:
    """Reverse the decimal digits of ``x``; 0 if the result leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if _INT_MIN <= result <= _INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Tell whether ``x`` reads the same backwards; negatives never do."""
    if x < 0:
        return False
    text = str(x)
    return text == text[::-1]