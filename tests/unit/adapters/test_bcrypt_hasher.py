"""
Unit tests for the bcrypt credential hasher.
"""
import pytest

from passgen.adapters.services.bcrypt_credential_hasher import BcryptCredentialHasher


@pytest.mark.unit
def test_encode_and_verify(credential_hasher):
    hashed = credential_hasher.encode("aB!defghi")

    assert hashed.startswith("$2b$04$")
    assert credential_hasher.verify("aB!defghi", hashed)
    assert not credential_hasher.verify("aB!defghj", hashed)


@pytest.mark.unit
def test_hashes_are_salted(credential_hasher):
    assert credential_hasher.encode("abcdef") != credential_hasher.encode("abcdef")


@pytest.mark.unit
def test_long_multibyte_passwords(credential_hasher):
    password = "ü" * 32
    hashed = credential_hasher.encode(password)

    assert credential_hasher.verify(password, hashed)
    assert not credential_hasher.verify("ü" * 31 + "u", hashed)


@pytest.mark.unit
def test_malformed_hash_never_matches(credential_hasher):
    assert credential_hasher.verify("abcdef", "not-a-bcrypt-hash") is False


@pytest.mark.unit
def test_default_rounds_from_rules():
    from passgen.config.password_rules import password_rules

    assert BcryptCredentialHasher().rounds == password_rules.bcrypt_rounds
