"""Tests for credential hashing."""

import hashlib
import secrets

import pytest

import passwords
from errors import AuthUnavailable
from passwords import hash_password, verify_password


def _legacy_credential(plaintext: str) -> str:
    # format written by the old Node service: hex(scrypt key) + "." + salt
    salt = secrets.token_hex(16)
    key = hashlib.scrypt(plaintext.encode(), salt=salt.encode(), n=16384, r=8, p=1, dklen=64)
    return f"{key.hex()}.{salt}"


def test_hash_then_verify() -> None:
    credential = hash_password("pw123456")
    assert credential.startswith("scrypt:")
    assert "pw123456" not in credential
    assert verify_password("pw123456", credential) is True


def test_wrong_password_rejected() -> None:
    assert verify_password("other-password", hash_password("pw123456")) is False


def test_salt_differs_per_call() -> None:
    assert hash_password("same") != hash_password("same")


@pytest.mark.parametrize("credential", ["", "not-a-hash", "abc.def", "md5$x$y", "scrypt:1:1$only-two", "zz" * 64 + ".salt"])
def test_malformed_credential_is_false(credential) -> None:
    assert verify_password("pw123456", credential) is False


@pytest.mark.parametrize(
    "credential",
    ["scrypt:abc$salt$deadbeef", "scrypt:1:2$salt$deadbeef", "pbkdf2:sha999$salt$deadbeef"],
)
def test_bad_hash_parameters_are_false(credential) -> None:
    assert verify_password("pw123456", credential) is False


def test_verify_memory_error_is_unavailable(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise MemoryError()

    monkeypatch.setattr(passwords, "check_password_hash", boom)
    with pytest.raises(AuthUnavailable):
        verify_password("pw123456", hash_password("pw123456"))


def test_legacy_credential_verifies() -> None:
    credential = _legacy_credential("helio_2025")
    assert verify_password("helio_2025", credential) is True
    assert verify_password("helio_2026", credential) is False


def test_derivation_failure_is_generic(monkeypatch) -> None:
    def boom(*args, **kwargs):
        raise MemoryError()

    monkeypatch.setattr(passwords, "generate_password_hash", boom)
    with pytest.raises(AuthUnavailable) as exc:
        hash_password("pw123456")
    assert "pw123456" not in str(exc.value)
    assert exc.value.status_code == 503
