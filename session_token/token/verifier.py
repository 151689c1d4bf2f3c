"""Token verification with expiry classification and sliding refresh."""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import CipherError, EnvelopeParseError
from .envelope import parse_envelope
from .issuer import TokenIssuer
from .types import FailureKind, TokenEnvelope, VerificationResult, VerificationStatus

logger = logging.getLogger(__name__)


class TokenVerifier:
    """Decrypt tokens, classify their access/refresh state and re-issue when eligible.

    Re-issuance goes through ``issuer`` so a refreshed token shares its
    cipher, clock and key generator.
    """

    def __init__(self, *, issuer: Optional[TokenIssuer] = None) -> None:
        self.issuer = issuer or TokenIssuer()

    def decode(self, token: str, secret_key: str) -> TokenEnvelope:
        """Decrypt and parse ``token`` without classifying it."""
        return parse_envelope(self.issuer.cipher.decrypt(token, secret_key))

    def verify(
        self,
        token: str,
        secret_key: str,
        *,
        is_key_random: Optional[bool] = None,
        random_key_length: Optional[int] = None,
    ) -> VerificationResult:
        try:
            envelope = self.decode(token, secret_key)
        except CipherError:
            logger.debug("token not verified: %s", FailureKind.CIPHER_FAILURE.value)
            return VerificationResult.not_verified(FailureKind.CIPHER_FAILURE)
        except EnvelopeParseError:
            logger.debug("token not verified: %s", FailureKind.ENVELOPE_PARSE_FAILURE.value)
            return VerificationResult.not_verified(FailureKind.ENVELOPE_PARSE_FAILURE)

        now = self.issuer.clock()
        status = VerificationStatus.VERIFIED
        new_token = token
        key = secret_key
        refreshed = False

        if envelope.refresher_expired_at is not None:
            if envelope.refresher_expired(now) and envelope.access_expired(now):
                status = VerificationStatus.ACCESS_AND_REFRESHER_EXPIRED
                logger.info("token access and refresh windows both expired")
            elif envelope.access_expired(now):
                status = VerificationStatus.ACCESS_EXPIRED
                new_token, key = self._refresh(envelope, secret_key, is_key_random, random_key_length)
                refreshed = True
        elif envelope.access_expired(now):
            status = VerificationStatus.ACCESS_EXPIRED

        return VerificationResult(
            status=status,
            payload=envelope.payload,
            new_token=new_token,
            key=key,
            created_at=envelope.created_at,
            refreshed=refreshed,
        )

    def _refresh(
        self,
        envelope: TokenEnvelope,
        secret_key: str,
        is_key_random: Optional[bool],
        random_key_length: Optional[int],
    ) -> tuple[str, str]:
        # Durations come from the original envelope; the new windows start now.
        assert envelope.access_expired_at is not None and envelope.refresher_expired_at is not None
        access_range = envelope.access_expired_at - envelope.created_at
        refresher_range = envelope.refresher_expired_at - envelope.created_at

        config = self.issuer.config
        if is_key_random is None:
            is_key_random = config.refresh_key_random
        if is_key_random:
            length = config.refresh_key_length if random_key_length is None else random_key_length
            key = self.issuer.key_generator.generate(length)
        else:
            key = secret_key

        issued = self.issuer.issue(
            envelope.payload,
            secret_key=key,
            access_token_expired_in=access_range,
            refresher_expired_in=refresher_range,
            with_refresher=True,
        )
        logger.info("token refreshed access_ms=%d refresh_ms=%d new_key=%s", access_range, refresher_range, is_key_random)
        return issued.token, key
