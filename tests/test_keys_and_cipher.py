import random

import pytest

from session_token.crypto.cipher import FernetCipher
from session_token.errors import CipherError
from session_token.token.keys import ALPHABET, SecretKeyGenerator, generate_secret_key


def test_generated_key_has_requested_length_and_alphabet() -> None:
    gen = SecretKeyGenerator()
    for length in (1, 6, 32):
        key = gen.generate(length)
        assert len(key) == length
        assert set(key) <= set(ALPHABET)


def test_default_key_length_is_six() -> None:
    assert len(generate_secret_key()) == 6
    assert len(ALPHABET) == 62


def test_generated_keys_differ() -> None:
    keys = {generate_secret_key(6) for _ in range(200)}
    assert len(keys) >= 199


def test_seeded_generator_is_deterministic() -> None:
    a = SecretKeyGenerator(random.Random(7)).generate(12)
    b = SecretKeyGenerator(random.Random(7)).generate(12)
    assert a == b


def test_key_length_below_one_rejected() -> None:
    with pytest.raises(ValueError):
        SecretKeyGenerator().generate(0)


def test_cipher_round_trip_and_wrong_key() -> None:
    cipher = FernetCipher()
    ciphertext = cipher.encrypt('{"a":1}', "k3y")
    assert cipher.decrypt(ciphertext, "k3y") == '{"a":1}'
    with pytest.raises(CipherError):
        cipher.decrypt(ciphertext, "other")


def test_cipher_rejects_empty_key_and_garbage() -> None:
    cipher = FernetCipher()
    with pytest.raises(CipherError):
        cipher.encrypt("x", "")
    with pytest.raises(CipherError):
        cipher.decrypt("not-a-token", "k3y")
