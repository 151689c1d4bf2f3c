"""Encrypted session token issuance, verification and refresh."""

from .issuer import TokenIssuer
from .keys import SecretKeyGenerator, generate_secret_key
from .service import TokenService, get_default_service, issue_token, verify_token
from .types import FailureKind, IssuedToken, TokenEnvelope, VerificationResult, VerificationStatus
from .verifier import TokenVerifier

__all__ = [
    "TokenIssuer",
    "TokenVerifier",
    "TokenService",
    "SecretKeyGenerator",
    "generate_secret_key",
    "get_default_service",
    "issue_token",
    "verify_token",
    "FailureKind",
    "IssuedToken",
    "TokenEnvelope",
    "VerificationResult",
    "VerificationStatus",
]
