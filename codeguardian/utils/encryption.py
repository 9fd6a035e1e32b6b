from cryptography.fernet import Fernet, InvalidToken

from codeguardian.exceptions import CredentialError


class CredentialCipher:
    """Encrypts and decrypts stored GitHub access tokens with a Fernet key."""

    def __init__(self, key: str):
        try:
            self._fernet = Fernet(key.encode() if isinstance(key, str) else key)
        except (ValueError, TypeError) as e:
            raise ValueError(f"ENCRYPTION_KEY is not a valid Fernet key: {e}") from e

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt(self, ciphertext: str) -> str:
        try:
            return self._fernet.decrypt(ciphertext.encode()).decode()
        except InvalidToken as e:
            raise CredentialError("Stored access token could not be decrypted.") from e
