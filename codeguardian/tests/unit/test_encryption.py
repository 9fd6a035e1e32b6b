import pytest
from cryptography.fernet import Fernet

from codeguardian.exceptions import CredentialError
from codeguardian.utils.encryption import CredentialCipher


def test_decrypt_returns_original_token(cipher):
    ciphertext = cipher.encrypt("gho_abc123")

    assert ciphertext != "gho_abc123"
    assert cipher.decrypt(ciphertext) == "gho_abc123"


def test_decrypt_with_other_key_raises(cipher):
    other = CredentialCipher(Fernet.generate_key().decode())

    with pytest.raises(CredentialError):
        other.decrypt(cipher.encrypt("gho_abc123"))


def test_decrypt_garbage_raises(cipher):
    with pytest.raises(CredentialError):
        cipher.decrypt("not-a-token")


def test_invalid_key_raises_value_error():
    with pytest.raises(ValueError, match="not a valid Fernet key"):
        CredentialCipher("too-short")
