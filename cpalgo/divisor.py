"""Zeta and Möbius transforms over the divisor lattice, and GCD/LCM convolutions.

Sequences are indexed from 1; position 0 is left as it is.
"""

from __future__ import annotations

from math import isqrt
from typing import MutableSequence, Sequence


def _primes_upto(n: int) -> list[int]:
    if n < 2:
        return []
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i::i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i in range(2, n + 1) if sieve[i]]


def divisor_zeta(a: MutableSequence) -> None:
    """In place: ``a[k]`` becomes the sum of ``a[d]`` over divisors ``d`` of ``k``."""
    n = len(a) - 1
    for d in _primes_upto(n):
        for i in range(1, n // d + 1):
            a[i * d] += a[i]


def divisor_reversed_zeta(a: MutableSequence) -> None:
    """In place: ``a[k]`` becomes the sum of ``a[m]`` over multiples ``m`` of ``k``."""
    n = len(a) - 1
    for d in _primes_upto(n):
        for i in range(n // d, 0, -1):
            a[i] += a[i * d]


def divisor_mobius(a: MutableSequence) -> None:
    """In place inverse of :func:`divisor_zeta`."""
    n = len(a) - 1
    for d in _primes_upto(n):
        for i in range(n // d, 0, -1):
            a[i * d] -= a[i]


def divisor_reversed_mobius(a: MutableSequence) -> None:
    """In place inverse of :func:`divisor_reversed_zeta`."""
    n = len(a) - 1
    for d in _primes_upto(n):
        for i in range(1, n // d + 1):
            a[i] -= a[i * d]


def _check_pair(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    if not a:
        raise ValueError("sequences must be non-empty")


def _pointwise_product(a: list, b: list, mod: int | None) -> None:
    for i in range(1, len(a)):
        a[i] = a[i] * b[i] if mod is None else a[i] * b[i] % mod


def gcd_convolution(a: Sequence, b: Sequence, mod: int | None = None) -> list:
    """``c[k] = sum(a[i] * b[j] for gcd(i, j) == k)``, optionally reduced modulo ``mod``."""
    _check_pair(a, b)
    a, b = list(a), list(b)
    divisor_reversed_zeta(a)
    divisor_reversed_zeta(b)
    _pointwise_product(a, b, mod)
    divisor_reversed_mobius(a)
    return a if mod is None else [x % mod for x in a]


def lcm_convolution(a: Sequence, b: Sequence, mod: int | None = None) -> list:
    """``c[k] = sum(a[i] * b[j] for lcm(i, j) == k)``, optionally reduced modulo ``mod``."""
    _check_pair(a, b)
    a, b = list(a), list(b)
    divisor_zeta(a)
    divisor_zeta(b)
    _pointwise_product(a, b, mod)
    divisor_mobius(a)
    return a if mod is None else [x % mod for x in a]


def sum_for_coprime_index(f: MutableSequence) -> None:
    """In place: ``f[i]`` becomes the sum of ``f[j]`` over ``j >= 1`` coprime to ``i``."""
    size = len(f)
    if size <= 1:
        return
    total = f[1]
    for i in range(2, size):
        total += f[i]
    signs = [0] * size
    signs[1] = -1
    divisor_mobius(signs)
    divisor_reversed_zeta(f)
    zero = f[1] - f[1]
    f[1] = zero
    for i in range(2, size):
        if signs[i] == 0:
            f[i] = zero
        elif signs[i] == -1:
            f[i] = zero - f[i]
    divisor_zeta(f)
    for i in range(1, size):
        f[i] = total - f[i]