"""Random secret key generation for per-token keys."""

from __future__ import annotations

import random
from typing import Optional

from ..config import DEFAULT_KEY_LENGTH

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


class SecretKeyGenerator:
    """Produce alphanumeric keys drawn uniformly from :data:`ALPHABET`.

    Best-effort uniqueness only: fine for ephemeral per-token keys, not for
    long-lived secrets. Pass a seeded ``random.Random`` for deterministic keys.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.SystemRandom()

    def generate(self, length: int = DEFAULT_KEY_LENGTH) -> str:
        if length < 1:
            raise ValueError(f"Secret key length must be at least 1, got {length}.")
        return "".join(self._rng.choice(ALPHABET) for _ in range(length))


_DEFAULT_GENERATOR = SecretKeyGenerator()


def generate_secret_key(length: int = DEFAULT_KEY_LENGTH) -> str:
    """Return a random key of ``length`` characters from the shared generator."""
    return _DEFAULT_GENERATOR.generate(length)
