"""Encrypted session token issuer."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..config import TokenConfig
from ..crypto.cipher import Cipher, FernetCipher
from ..utils.time import now_ms
from .envelope import serialize_envelope
from .keys import SecretKeyGenerator
from .types import IssuedToken, TokenEnvelope

logger = logging.getLogger(__name__)


def _deadline(now: int, duration: Optional[float]) -> Optional[int]:
    # Envelope timestamps are whole milliseconds; fractional milliseconds are truncated.
    if not duration:
        return None
    return now + int(duration)


class TokenIssuer:
    """Seal a payload plus optional access/refresh deadlines into a token."""

    def __init__(
        self,
        *,
        config: Optional[TokenConfig] = None,
        cipher: Optional[Cipher] = None,
        clock: Callable[[], int] = now_ms,
        key_generator: Optional[SecretKeyGenerator] = None,
    ) -> None:
        self.config = config or TokenConfig()
        self.cipher = cipher or FernetCipher()
        self.clock = clock
        self.key_generator = key_generator or SecretKeyGenerator()

    def issue(
        self,
        payload: Any,
        *,
        secret_key: Optional[str] = None,
        secret_key_length: Optional[int] = None,
        access_token_expired_in: Optional[float] = None,
        refresher_expired_in: Optional[float] = None,
        with_refresher: bool = False,
    ) -> IssuedToken:
        """Issue a token; the key is returned so generated keys can be stored.

        ``with_refresher`` is accepted for call compatibility only. Refresh
        capability comes from ``refresher_expired_in`` alone. Zero durations
        mean "no deadline".
        """
        now = self.clock()
        if secret_key is None:
            length = self.config.secret_key_length if secret_key_length is None else secret_key_length
            key = self.key_generator.generate(length)
        else:
            key = secret_key

        envelope = TokenEnvelope(
            payload=payload,
            created_at=now,
            access_expired_at=_deadline(now, access_token_expired_in),
            refresher_expired_at=_deadline(now, refresher_expired_in),
        )
        token = self.cipher.encrypt(serialize_envelope(envelope), key)
        logger.debug(
            "issued token generated_key=%s access_window=%s refresh_window=%s",
            secret_key is None,
            envelope.access_expired_at is not None,
            envelope.refresher_expired_at is not None,
        )
        return IssuedToken(token=token, key=key)
