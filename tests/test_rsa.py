# pylint: disable=missing-module-docstring,redefined-outer-name
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest

import rsa32
import rsa32.rsa as rsau
from rsa32 import padding

TEXTBOOK = (3233, 17, 2753)
BIG_P, BIG_Q, BIG_E = 65521, 65519, 65537


@pytest.fixture(scope="module")
def big_pair() -> rsau.KeyPair:
    n = BIG_P * BIG_Q
    d = pow(BIG_E, -1, (BIG_P - 1) * (BIG_Q - 1))
    return rsau.KeyPair(rsau.RSAPubKey(n, BIG_E), rsau.RSAPrivKey(n, d))


@pytest.fixture(scope="module", params=range(3))
def generated_pair(request) -> rsau.KeyPair:
    return rsau.KeyPair.generate()


def test_textbook_primitive():
    n, e, d = TEXTBOOK
    assert rsau.RSAPubKey(n, e).c_rsa(65) == 2790
    assert rsau.RSAPrivKey(n, d).c_rsa(2790) == 65


def test_textbook_modulus_too_small_for_block(fixed_source):
    n, e, _ = TEXTBOOK
    with pytest.raises(ValueError):
        rsau.RSAPubKey(n, e).encrypt(65, fixed_source(b"\x7f"))


def test_padded_roundtrip_fixed_random(big_pair, fixed_source):
    cipher = big_pair.public.encrypt(65, fixed_source(b"\x7f"))
    assert cipher == pow(0x027F0041, BIG_E, BIG_P * BIG_Q)
    assert big_pair.private.c_rsa(cipher) == 0x027F0041
    assert big_pair.private.decrypt(cipher) == 65


@pytest.mark.parametrize("message", [-1, BIG_P * BIG_Q, 2**32 - 1])
def test_c_rsa_range(big_pair, message):
    with pytest.raises(ValueError):
        big_pair.public.c_rsa(message)


@pytest.mark.parametrize("mod,expo", [(2**32, 3), (3233, 2**32), (-1, 3)])
def test_key_validates_width(mod, expo):
    with pytest.raises(ValueError):
        rsau.RSAPubKey(mod, expo)


def test_generated_roundtrip_every_byte(generated_pair):
    assert generated_pair.public.mod == generated_pair.private.mod
    for m in range(256):
        c = rsau.encrypt(m, generated_pair.public)
        assert rsau.decrypt(c, generated_pair.private) == m


def test_decrypt_detects_bad_envelope(big_pair):
    bad = big_pair.public.c_rsa(0x017F0041)
    with pytest.raises(rsa32.PaddingError):
        big_pair.private.decrypt(bad)


def test_decrypt_detects_bad_separator(big_pair):
    bad = big_pair.public.c_rsa(0x027F0141)
    with pytest.raises(padding.PaddingError):
        big_pair.private.decrypt(bad)


def test_key_pair_generate(mocker):
    n, e, d = TEXTBOOK
    mocker.patch("rsa32.keygen.generate_key_pair", return_value=((n, e), (n, d)))
    kp = rsau.KeyPair.generate(rounds=7)
    assert kp.public == rsau.RSAPubKey(n, e)
    assert kp.private == rsau.RSAPrivKey(n, d)
    rsa32.keygen.generate_key_pair.assert_called_once_with(None, 7)


def test_key_pair_immutable(big_pair):
    with pytest.raises(AttributeError):
        big_pair.public = rsau.RSAPubKey(3233, 17)
    with pytest.raises(AttributeError):
        del big_pair.private


@pytest.mark.parametrize("cls", [rsau.RSAPubKey, rsau.RSAPrivKey])
@pytest.mark.parametrize("attr,value", [("mod", 2**40), ("expo", 3), ("extra", 1)])
def test_key_immutable(cls, attr, value):
    key = cls(3233, 17)
    with pytest.raises(AttributeError):
        setattr(key, attr, value)
    assert (key.mod, key.expo) == (3233, 17)


def test_key_delete_rejected():
    key = rsau.RSAPubKey(3233, 17)
    with pytest.raises(AttributeError):
        del key.expo
    assert key.expo == 17


def test_key_hash_stable_in_set():
    n, e, d = TEXTBOOK
    kp = rsau.KeyPair(rsau.RSAPubKey(n, e), rsau.RSAPrivKey(n, d))
    keys = {kp.public}
    with pytest.raises(AttributeError):
        kp.public.expo = 3
    assert kp.public in keys
    assert rsau.RSAPubKey(n, e) in keys


def test_key_pair_rejects_mismatched_modulus():
    with pytest.raises(ValueError):
        rsau.KeyPair(rsau.RSAPubKey(3233, 17), rsau.RSAPrivKey(4294836223, 2753))


def test_key_pair_unpacks(big_pair):
    public, private = big_pair
    assert public is big_pair.public
    assert private is big_pair.private
    assert public.mod == private.mod


def test_key_equality():
    assert rsau.RSAPubKey(3233, 17) == rsau.RSAPubKey(3233, 17)
    assert rsau.RSAPubKey(3233, 17) != rsau.RSAPrivKey(3233, 17)
    assert rsau.RSAPubKey(3233, 17) != rsau.RSAPubKey(3233, 7)
    assert len({rsau.RSAPubKey(3233, 17), rsau.RSAPubKey(3233, 17)}) == 1


def test_key_repr_hides_exponent():
    assert repr(rsau.RSAPrivKey(3233, 2753)) == "RSAPrivKey(mod=3233)"


def test_generate_entropy_failure(mocker):
    gen = mocker.Mock(side_effect=OSError("no entropy"))
    with pytest.raises(rsa32.EntropyFailure):
        rsau.KeyPair.generate(rsa32.RandomSource(gen))
