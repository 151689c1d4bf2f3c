"""Configuration for token issuance and refresh defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_KEY_LENGTH = 6

_TRUTHY = {"1", "true", "yes", "on"}


def _int_from_env(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


@dataclass(frozen=True)
class TokenConfig:
    """Defaults applied when a call does not pass its own key options."""

    secret_key_length: int = DEFAULT_KEY_LENGTH
    refresh_key_random: bool = False
    refresh_key_length: int = DEFAULT_KEY_LENGTH

    def __post_init__(self) -> None:
        for name in ("secret_key_length", "refresh_key_length"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be at least 1, got {value}.")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenConfig":
        """Build config from ``SESSION_TOKEN_*`` environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            secret_key_length=_int_from_env(env, "SESSION_TOKEN_KEY_LENGTH", DEFAULT_KEY_LENGTH),
            refresh_key_random=env.get("SESSION_TOKEN_REFRESH_KEY_RANDOM", "").strip().lower() in _TRUTHY,
            refresh_key_length=_int_from_env(env, "SESSION_TOKEN_REFRESH_KEY_LENGTH", DEFAULT_KEY_LENGTH),
        )
