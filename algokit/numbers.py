"""Small number-theory and arithmetic helpers."""

from __future__ import annotations

import math
from collections.abc import Iterator


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _require_positive(name: str, value: int) -> None:
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def ackermann(m: int, n: int) -> int:
    """Return the Ackermann function A(m, n).

    Evaluated with an explicit stack so deep recursion does not hit
    the interpreter's recursion limit.
    """
    _require_non_negative("m", m)
    _require_non_negative("n", n)
    pending = [m]
    while pending:
        current = pending.pop()
        if current == 0:
            n += 1
        elif n == 0:
            pending.append(current - 1)
            n = 1
        else:
            pending.append(current - 1)
            pending.append(current)
            n -= 1
    return n


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    _require_non_negative("n", n)
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    _require_non_negative("n", n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_series(count: int) -> Iterator[int]:
    """Yield the first ``count`` Fibonacci numbers; nothing if count <= 0."""
    previous, current = 0, 1
    for _ in range(max(count, 0)):
        yield previous
        previous, current = current, previous + current


def hcf(a: int, b: int) -> int:
    """Return the highest common factor of two positive integers."""
    _require_positive("a", a)
    _require_positive("b", b)
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of two positive integers."""
    _require_positive("a", a)
    _require_positive("b", b)
    return a * b // math.gcd(a, b)


def is_prime(n: int) -> bool:
    """Return True when n has exactly two positive divisors."""
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % divisor for divisor in range(3, math.isqrt(n) + 1, 2))


def is_even(n: int) -> bool:
    """Return True when n is divisible by two."""
    return n % 2 == 0


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    """Convert a Fahrenheit temperature to Celsius."""
    return (fahrenheit - 32) * 5 / 9


def bitwise_summary(a: int, b: int) -> dict[str, int]:
    """Return the results of the basic bitwise operators on a and b."""
    return {
        "and": a & b,
        "or": a | b,
        "xor": a ^ b,
        "not": ~a,
        "left_shift": a << 2,
        "right_shift": a >> 1,
    }