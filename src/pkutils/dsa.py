"""Provides the Digital Signature Algorithm over a prime-order subgroup.

With a 256 bit subgroup order the signatures are standard FIPS 186 DSA signatures of `str(m).encode()` under
SHA-256, so they interoperate with other implementations.

Typical usage example:

    dsa = DSA(p=124540019, q=17389, g=10083255, y=119946265, x=12496)
    sig = dsa.sign(5234673)
    assert dsa.verify(5234673, sig)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from pkutils.crypto import expect_shape
from pkutils.crypto import Pair
from pkutils.crypto import Sign
from pkutils.utils import fermat_inverse
from pkutils.utils import random_bignum

_MAX_DRAWS: int = 32


class DSA(Sign):
    """DSA domain parameters, key pair and the signing primitives.

    The caller guarantees that `p` and `q` are prime, `q` divides `p - 1`, `g` has order `q` modulo `p` and
    `y == g**x mod p`. None of it is checked.

    Attributes:
        p: Public prime.
        q: Public subgroup order.
        g: Public subgroup generator.
        y: Public value `g**x mod p`.
        x: Secret exponent.
    """

    def __init__(self, p: int, q: int, g: int, y: int, x: int) -> None:
        self.p = p
        self.q = q
        self.g = g
        self.y = y
        self.x = x

    def sign(self, m: int) -> Pair:
        """Produces the signature `(r, s)`.

        With `k` drawn fresh from `[1, q)`:

            r = (g**k mod p) mod q
            s = k**-1 * (hash(m) + x * r) mod q

        A draw that yields `r == 0` or `s == 0` is discarded and `k` drawn again. Valid parameters reject at most a
        couple of `k` values, so after `_MAX_DRAWS` rejections the parameters are degenerate and the last pair is
        returned as computed.

        Args:
            m: The message to sign.

        Returns:
            The signature pair.
        """
        h = self.hash(m)
        for _ in range(_MAX_DRAWS):
            k = random_bignum(1, self.q)
            r = pow(self.g, k, self.p) % self.q
            s = fermat_inverse(k, self.q) * (h + self.x * r) % self.q
            if r != 0 and s != 0:
                break
        return Pair(r, s)

    def verify(self, m: int, sig: Pair) -> bool:
        """Checks the signature `(r, s)` against `m`.

        Computes `w = s**-1 mod q`, `u1 = hash(m) * w mod q` and `u2 = r * w mod q`, then accepts if
        `(g**u1 * y**u2 mod p) mod q == r`.

        Args:
            m: The message the signature claims to cover.
            sig: The signature pair.

        Returns:
            True if the signature is valid, False otherwise. Components outside `(0, q)` are never valid.
        """
        expect_shape(sig, Pair, "Not a pair")
        r, s = sig
        if not (0 < r < self.q and 0 < s < self.q):
            return False
        w = fermat_inverse(s, self.q)
        u1 = self.hash(m) * w % self.q
        u2 = r * w % self.q
        v = pow(self.g, u1, self.p) * pow(self.y, u2, self.p) % self.p % self.q
        return v == r
