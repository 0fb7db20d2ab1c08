"""Result shapes and capability interfaces shared by the encryption and signature algorithms.

An algorithm produces either a single integer or an ordered pair of integers, depending on its construction. The
shapes are immutable named tuples, and each algorithm declares the exact one it produces and consumes.

Typical usage example:

    class Textbook(Encrypt):
        def encrypt(self, m: int) -> Single: ...
        def decrypt(self, c: Single) -> int: ...
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import abc
import hashlib
import typing


class Single(typing.NamedTuple):
    """A result consisting of one integer (RSA ciphertexts and signatures)."""
    value: int


class Pair(typing.NamedTuple):
    """A result consisting of an ordered pair of integers (ElGamal ciphertexts, DSA signatures)."""
    first: int
    second: int

    @property
    def c1(self) -> int:
        return self.first

    @property
    def c2(self) -> int:
        return self.second

    @property
    def r(self) -> int:
        return self.first

    @property
    def s(self) -> int:
        return self.second


Ciphertext = Single | Pair
Signature = Single | Pair


def digest(m: int) -> int:
    """Maps a message integer to its SHA-256 digest integer.

    The message is rendered as canonical decimal text, hashed, and the hexadecimal digest read back as a base 16
    integer. The decimal step must stay exactly as is for signatures to remain interoperable.

    Args:
        m: The message.

    Returns:
        A non-negative integer below 2**256.
    """
    return int(hashlib.sha256(str(m).encode("ascii")).hexdigest(), 16)


def expect_shape(value: Ciphertext | Signature, shape: type, error: str) -> None:
    """Raises TypeError when an algorithm is handed a result shape it never produces."""
    if not isinstance(value, shape):
        raise TypeError(error)


class Encrypt(abc.ABC):
    """Encrypt/decrypt capability."""

    @abc.abstractmethod
    def encrypt(self, m: int) -> Ciphertext:
        """Encrypts the message integer `m`."""

    @abc.abstractmethod
    def decrypt(self, c: Ciphertext) -> int:
        """Recovers the message integer from the ciphertext `c`."""


class Sign(abc.ABC):
    """Sign/verify capability.

    The message is always hashed with `hash` before signing, which is a static method so it may be called on the
    algorithm class itself.
    """

    @staticmethod
    def hash(m: int) -> int:
        """Delegates to `digest`."""
        return digest(m)

    @abc.abstractmethod
    def sign(self, m: int) -> Signature:
        """Signs the message integer `m`."""

    @abc.abstractmethod
    def verify(self, m: int, sig: Signature) -> bool:
        """Checks `sig` against `m`. A mismatch is a normal False, not an error."""
