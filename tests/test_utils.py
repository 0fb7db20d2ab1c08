# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import collections

import pytest
import sympy

import pkutils
from pkutils import utils


@pytest.mark.parametrize("text, expected", [
    ("0", 0),
    ("2", 2),
    (b"124540019", 124540019),
    (" 5234673\n", 5234673),
    ("1" * 400, int("1" * 400)),
])
def test_bignum(text, expected):
    assert utils.bignum(text) == expected


@pytest.mark.parametrize("text", ["", "-5", "0x10", "12a", "1.5", "١٢", b"\xff"])
def test_bignum_rejects(text):
    with pytest.raises(ValueError, match="Not a number"):
        utils.bignum(text)


@pytest.mark.parametrize("lower, upper", [(1, 2), (0, 10), (1, 17389), (2**255, 2**256)])
def test_random_bignum_in_range(lower, upper):
    for _ in range(200):
        assert lower <= utils.random_bignum(lower, upper) < upper


def test_random_bignum_singleton_range():
    assert utils.random_bignum(41, 42) == 41


@pytest.mark.parametrize("lower, upper", [(5, 5), (6, 5)])
def test_random_bignum_empty_range(lower, upper):
    with pytest.raises(ValueError, match="Empty range"):
        utils.random_bignum(lower, upper)


def test_random_bignum_covers_range():
    counts = collections.Counter(utils.random_bignum(3, 8) for _ in range(2000))
    assert set(counts) == {3, 4, 5, 6, 7}
    # Each bucket expects 400 hits; 250 is far outside any plausible deviation.
    assert min(counts.values()) > 250


def test_random_bignum_uses_secrets(mocker):
    rnd = mocker.patch("pkutils.utils.secrets.randbelow", return_value=7)
    assert utils.random_bignum(10, 100) == 17
    rnd.assert_called_once_with(90)


@pytest.mark.parametrize("p", [2357, 17389, 124540019, 2**127 - 1])
def test_fermat_inverse(p):
    assert sympy.isprime(p)
    for a in (1, 2, 3, p - 1, p // 2):
        assert a * utils.fermat_inverse(a, p) % p == 1
        assert utils.fermat_inverse(a, p) == pow(a, -1, p)


def test_digest_regression(vectors):
    assert pkutils.digest(2) == vectors["digest_of_2"]


def test_digest_is_decimal_sha256():
    # sha256(b"0")
    assert pkutils.digest(0) == 0x5feceb66ffc86f38d952786c6d696c79c2dbc239dd4e91b46729d73a27fb57e9


def test_digest_deterministic(vectors):
    m = vectors["message"]
    assert pkutils.digest(m) == pkutils.digest(m)
    assert pkutils.digest(m) != pkutils.digest(m + 1)
    assert 0 <= pkutils.digest(m) < 2**256
