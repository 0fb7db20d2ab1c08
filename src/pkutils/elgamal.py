"""Provides ElGamal encryption over the multiplicative group of a prime field."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from pkutils.crypto import Encrypt
from pkutils.crypto import expect_shape
from pkutils.crypto import Pair
from pkutils.utils import random_bignum


class ElGamal(Encrypt):
    """ElGamal key material and its encryption primitives.

    Nothing is validated: `p` must be prime, `g` a generator and `y == g**x mod p`, else decryption returns garbage.

    Attributes:
        p: Public prime.
        g: Public group generator.
        y: Public value `g**x mod p`.
        x: Secret exponent.
    """

    def __init__(self, p: int, g: int, y: int, x: int) -> None:
        self.p = p
        self.g = g
        self.y = y
        self.x = x

    def encrypt(self, m: int) -> Pair:
        """Computes the ciphertext `(g**k mod p, m * s mod p)`.

        Here `k` is drawn fresh from `[1, p - 1)` on every call and `s = y**k mod p` is the shared secret.
        """
        if m >= self.p:
            warnings.warn("Message representative is not below the prime and cannot be recovered.", RuntimeWarning)
        k = random_bignum(1, self.p - 1)
        s = pow(self.y, k, self.p)
        return Pair(pow(self.g, k, self.p), m * s % self.p)

    def decrypt(self, c: Pair) -> int:
        """Recovers `m = c2 * s**-1 mod p`.

        The inverse of the shared secret is `c1**-x`, which Fermat's little theorem lets us write as
        `c1**(p - 1 - x) mod p`.
        """
        expect_shape(c, Pair, "Not a pair")
        s_inv = pow(c.c1, self.p - 1 - self.x, self.p)
        return c.c2 * s_inv % self.p
