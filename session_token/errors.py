"""Error taxonomy for token issuance and verification."""

from __future__ import annotations


class TokenError(Exception):
    """Base class for failures raised by the token core and its collaborators."""


class CipherError(TokenError):
    """Raised when encryption or decryption fails (bad key, corrupt ciphertext)."""


class EnvelopeParseError(TokenError):
    """Raised when decrypted plaintext is not a valid token envelope."""
