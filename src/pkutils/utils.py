"""Generic number utilities shared by the algorithms.

Covers parsing of large decimal literals, uniform sampling of ephemeral secrets from the system CSPRNG and modular
inversion over prime moduli.

Typical usage example:

    p = bignum("124540019")
    k = random_bignum(1, p - 1)
    k_inv = fermat_inverse(k, p)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import secrets


def bignum(s: str | bytes) -> int:
    """Creates an integer from its base 10 text representation.

    Args:
        s: Decimal digits, as text or ASCII bytes. Surrounding whitespace is ignored.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If `s` is not a non-negative decimal number.
    """
    if isinstance(s, bytes):
        s = s.decode("ascii", errors="replace")
    s = s.strip()
    if not s.isdecimal() or not s.isascii():
        raise ValueError("Not a number")
    return int(s, 10)


def random_bignum(lower: int, upper: int) -> int:
    """Draws a uniformly distributed integer from `[lower, upper)`.

    Every call is an independent draw from `secrets`, which is safe to share between threads.

    Args:
        lower: Inclusive lower bound.
        upper: Exclusive upper bound.

    Returns:
        The sampled integer.

    Raises:
        ValueError: If the range is empty.
    """
    if lower >= upper:
        raise ValueError("Empty range: lower bound must be below upper bound")
    return lower + secrets.randbelow(upper - lower)


def fermat_inverse(a: int, p: int) -> int:
    """Computes the inverse of `a` modulo the prime `p` as `a**(p-2) mod p`.

    Relies on Fermat's little theorem, so the result is meaningless for composite `p` and zero for `a` divisible
    by `p`. Neither case is checked.
    """
    return pow(a, p - 2, p)
