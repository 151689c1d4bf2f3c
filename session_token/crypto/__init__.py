"""Symmetric cipher collaborators used to seal token envelopes."""

from .cipher import Cipher, FernetCipher

__all__ = ["Cipher", "FernetCipher"]
