"""Small bit-manipulation helpers."""

from __future__ import annotations


def to_binary(n: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return "0"
    digits = []
    while n > 0:
        digits.append("1" if n % 2 else "0")
        n //= 2
    return "".join(reversed(digits))


def from_binary(text: str) -> int:
    """Return the value of a binary string; any character other than '1' counts as 0."""
    value = 0
    for weight, char in enumerate(reversed(text)):
        if char == "1":
            value += 1 << weight
    return value


def is_power_of_two(n: int) -> bool:
    """Return True when n is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def odd_even(n: int) -> str:
    """Return 'odd' or 'even' by testing the lowest bit."""
    lowest_bit = n & 1
    if lowest_bit:
        return "odd"
    return "even"


def bit_operations(n: int, i: int) -> tuple[int, int, int]:
    """Return the 1-based i-th bit of n, n with it set, and n with it cleared."""
    if i < 1:
        raise ValueError("bit position is 1-based and must be at least 1")
    mask = 1 << (i - 1)
    return (n >> (i - 1)) & 1, n | mask, n & ~mask


def is_kth_bit_set(n: int, k: int) -> bool:
    """Return True when the 0-based k-th bit of n is set."""
    if k < 0:
        raise ValueError("bit position must be non-negative")
    return bool((n >> k) & 1)


def set_rightmost_unset(n: int) -> int:
    """Return n with its lowest clear bit set."""
    return n | (n + 1)


def unset_rightmost_set(n: int) -> int:
    """Return n with its lowest set bit cleared."""
    return n & (n - 1)


def xor_swap(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using exclusive-or and return them."""
    a ^= b
    b ^= a
    a ^= b
    return a, b