"""Classical Public-Key Primitives in an Academic Sense.

Provides textbook RSA (encryption, decryption, signing, verification), ElGamal (encryption, decryption) and DSA
(signing, verification) over plain Python integers, together with the shared utilities they are built on:
modular inversion, uniform sampling of ephemeral secrets and a SHA-256 based message digest.

Key generation and parameter validation are out of scope: every algorithm trusts the numbers it is handed.

Typical usage example:

    rsa = RSA(n=2357 * 2551, e=3674911, d=422191)
    c = rsa.encrypt(5234673)
    m = rsa.decrypt(c)
    dsa = DSA(p=124540019, q=17389, g=10083255, y=119946265, x=12496)
    assert dsa.verify(m, dsa.sign(m))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from pkutils.crypto import Ciphertext
from pkutils.crypto import digest
from pkutils.crypto import Encrypt
from pkutils.crypto import Pair
from pkutils.crypto import Sign
from pkutils.crypto import Signature
from pkutils.crypto import Single
from pkutils.dsa import DSA
from pkutils.elgamal import ElGamal
from pkutils.rsa import RSA
from pkutils.utils import bignum
from pkutils.utils import random_bignum

__version__ = "0.0.1"
__all__ = [
    "RSA",
    "ElGamal",
    "DSA",
    "Encrypt",
    "Sign",
    "Single",
    "Pair",
    "Ciphertext",
    "Signature",
    "digest",
    "bignum",
    "random_bignum",
]
