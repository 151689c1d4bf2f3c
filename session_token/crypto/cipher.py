"""Symmetric encryption of envelope plaintext under a caller-supplied key."""

from __future__ import annotations

import base64
import hashlib
from abc import ABC, abstractmethod

from cryptography.fernet import Fernet, InvalidToken

from ..errors import CipherError


class Cipher(ABC):
    """Abstract base class for string-in, string-out symmetric ciphers."""

    @abstractmethod
    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt ``plaintext`` with ``key`` and return printable ciphertext."""

    @abstractmethod
    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt ``ciphertext`` with ``key``; raise :class:`CipherError` on failure."""


class FernetCipher(Cipher):
    """Fernet (AES-CBC + HMAC-SHA256) keyed by a SHA-256 digest of the secret string.

    Fernet authenticates its ciphertext, so a wrong key, a truncated token or
    a substituted character all fail decryption instead of yielding garbage.
    """

    def _fernet(self, key: str) -> Fernet:
        if not key:
            raise CipherError("Secret key must be a non-empty string.")
        digest = hashlib.sha256(key.encode("utf-8")).digest()
        return Fernet(base64.urlsafe_b64encode(digest))

    def encrypt(self, plaintext: str, key: str) -> str:
        token = self._fernet(key).encrypt(plaintext.encode("utf-8"))
        return token.decode("utf-8")

    def decrypt(self, ciphertext: str, key: str) -> str:
        fernet = self._fernet(key)
        try:
            plaintext = fernet.decrypt(ciphertext.encode("utf-8"))
        except (InvalidToken, UnicodeEncodeError) as exc:
            raise CipherError("Failed to decrypt token; invalid ciphertext or key.") from exc
        try:
            return plaintext.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise CipherError("Decrypted token is not valid UTF-8.") from exc
