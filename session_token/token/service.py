"""Stateless token service facade and the shared default instance."""

from __future__ import annotations

from typing import Any, Callable, Optional

from ..config import TokenConfig
from ..crypto.cipher import Cipher
from ..utils.time import now_ms
from .issuer import TokenIssuer
from .keys import SecretKeyGenerator
from .types import IssuedToken, VerificationResult
from .verifier import TokenVerifier


class TokenService:
    """Issue and verify self-refreshing encrypted session tokens."""

    def __init__(
        self,
        *,
        config: Optional[TokenConfig] = None,
        cipher: Optional[Cipher] = None,
        clock: Callable[[], int] = now_ms,
        key_generator: Optional[SecretKeyGenerator] = None,
    ) -> None:
        self.issuer = TokenIssuer(config=config, cipher=cipher, clock=clock, key_generator=key_generator)
        self.verifier = TokenVerifier(issuer=self.issuer)

    @property
    def config(self) -> TokenConfig:
        return self.issuer.config

    def generate_secret_key(self, length: Optional[int] = None) -> str:
        return self.issuer.key_generator.generate(self.config.secret_key_length if length is None else length)

    def issue_token(
        self,
        payload: Any,
        *,
        secret_key: Optional[str] = None,
        secret_key_length: Optional[int] = None,
        access_token_expired_in: Optional[float] = None,
        refresher_expired_in: Optional[float] = None,
        with_refresher: bool = False,
    ) -> IssuedToken:
        return self.issuer.issue(
            payload,
            secret_key=secret_key,
            secret_key_length=secret_key_length,
            access_token_expired_in=access_token_expired_in,
            refresher_expired_in=refresher_expired_in,
            with_refresher=with_refresher,
        )

    def verify_token(
        self,
        token: str,
        secret_key: str,
        *,
        is_key_random: Optional[bool] = None,
        random_key_length: Optional[int] = None,
    ) -> VerificationResult:
        return self.verifier.verify(
            token,
            secret_key,
            is_key_random=is_key_random,
            random_key_length=random_key_length,
        )


_default_service: Optional[TokenService] = None


def get_default_service() -> TokenService:
    """Return the shared service, configured from the environment on first use."""
    global _default_service
    if _default_service is None:
        _default_service = TokenService(config=TokenConfig.from_env())
    return _default_service


def issue_token(payload: Any, **kwargs: Any) -> IssuedToken:
    """Issue a token with the shared default service."""
    return get_default_service().issue_token(payload, **kwargs)


def verify_token(token: str, secret_key: str, **kwargs: Any) -> VerificationResult:
    """Verify a token with the shared default service."""
    return get_default_service().verify_token(token, secret_key, **kwargs)
