"""Signature encodings for moving signatures between processes as bytes or text.

DSA signatures use the DER encoding of the RFC 3279 `Dss-Sig-Value` structure, which is what other DSA
implementations emit and accept. RSA signatures are the fixed-length big-endian octets of the signature
representative. Keys and ciphertexts have no encoding here.

Typical usage example:

    der = encode_dss_signature(dsa.sign(m))
    text = b64_enc(der)
    assert dsa.verify(m, decode_dss_signature(b64_dec(text)))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import base64
import binascii

from pyasn1 import error
from pyasn1.codec.der import decoder
from pyasn1.codec.der import encoder
from pyasn1.codec.native import encoder as localize
from pyasn1_modules import rfc3279

from pkutils.crypto import Pair
from pkutils.crypto import Single


def encode_dss_signature(sig: Pair) -> bytes:
    """DER-encodes a DSA signature as `Dss-Sig-Value ::= SEQUENCE { r INTEGER, s INTEGER }`."""
    payload = rfc3279.Dss_Sig_Value()
    payload["r"] = sig.r
    payload["s"] = sig.s
    return encoder.encode(payload)


def decode_dss_signature(data: bytes) -> Pair:
    """Decodes a DER `Dss-Sig-Value` into a signature pair.

    Args:
        data: The DER bytes.

    Returns:
        The `(r, s)` pair.

    Raises:
        ValueError: If `data` is not exactly one well-formed `Dss-Sig-Value`.
    """
    try:
        payload, rest = decoder.decode(data, asn1Spec=rfc3279.Dss_Sig_Value())
    except error.PyAsn1Error as exc:
        raise ValueError("Malformed DSA signature.") from exc
    if rest:
        raise ValueError("Trailing data after DSA signature.")
    pysig = localize.encode(payload)
    return Pair(pysig["r"], pysig["s"])


def encode_rsa_signature(sig: Single, mod: int) -> bytes:
    """Encodes an RSA signature as big-endian octets as long as the modulus.

    Raises:
        ValueError: If the signature representative is outside `[0, mod)`.
    """
    if not 0 <= sig.value < mod:
        raise ValueError("Signature representative must be in range [0, mod-1]")
    return integer_to_bytes(sig.value, (mod.bit_length() + 7) // 8)


def decode_rsa_signature(data: bytes) -> Single:
    """Decodes big-endian signature octets."""
    return Single(bytes_to_integer(data))


def bytes_to_integer(msg: bytes) -> int:
    """Converts a byte string to an unsigned big-endian integer."""
    return int.from_bytes(msg, byteorder="big", signed=False)


def integer_to_bytes(msg: int, fixedlen: int) -> bytes:
    """Converts an integer to a fixed-length unsigned big-endian byte string."""
    return msg.to_bytes(fixedlen, byteorder="big", signed=False)


def b64_enc(data: bytes) -> str:
    """Encodes bytes as base64 text."""
    return base64.b64encode(data).decode("ascii")


def b64_dec(text: str) -> bytes:
    """Decodes base64 text.

    Raises:
        ValueError: If `text` is not valid base64.
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("Malformed base64 text.") from exc
