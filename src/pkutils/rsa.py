"""Provides textbook RSA: encryption, decryption, signing and verification on message integers.

No padding scheme is applied, so ciphertexts are deterministic and malleable and signatures are only as strong as
the digest that precedes them. Fine for study, unsafe for production.

Typical usage example:

    rsa = RSA(n=2357 * 2551, e=3674911, d=422191)
    c = rsa.encrypt(5234673)
    m = rsa.decrypt(c)
    sig = rsa.sign(m)
    assert rsa.verify(m, sig)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import warnings

from pkutils.crypto import Encrypt
from pkutils.crypto import expect_shape
from pkutils.crypto import Sign
from pkutils.crypto import Single


class RSA(Encrypt, Sign):
    """RSA key material and the textbook RSA primitives.

    The constructor stores what it is given. The caller is responsible for `e * d == 1 mod lcm(p - 1, q - 1)`;
    inconsistent values produce meaningless results rather than errors. Signatures compare against the full 256 bit
    digest without reducing it, so `verify` can only succeed when `n > 2**256`.

    Attributes:
        n: Public modulus.
        e: Public exponent.
        d: Secret exponent.
    """

    def __init__(self, n: int, e: int, d: int) -> None:
        self.n = n
        self.e = e
        self.d = d

    def encrypt(self, m: int) -> Single:
        """Computes `m**e mod n`.

        Warns if `m` is not below the modulus, as decryption then yields `m mod n` instead.
        """
        if m >= self.n:
            warnings.warn("Message representative is not below the modulus and cannot be recovered.",
                          RuntimeWarning)
        return Single(pow(m, self.e, self.n))

    def decrypt(self, c: Single) -> int:
        """Computes `c**d mod n`."""
        expect_shape(c, Single, "Not a single value")
        return pow(c.value, self.d, self.n)

    def sign(self, m: int) -> Single:
        """Produces the signature `hash(m)**d mod n`."""
        return Single(pow(self.hash(m), self.d, self.n))

    def verify(self, m: int, sig: Single) -> bool:
        """Computes `sig**e mod n` and compares it to `hash(m)`."""
        expect_shape(sig, Single, "Not a single value")
        return pow(sig.value, self.e, self.n) == self.hash(m)
