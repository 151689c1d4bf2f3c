"""Session Token package.

Stateless, symmetrically encrypted session tokens that carry a payload plus
optional access and refresh deadlines, and re-issue themselves while the
refresh window is open.
"""

from .config import TokenConfig
from .errors import CipherError, EnvelopeParseError, TokenError
from .token import (
    IssuedToken,
    TokenService,
    VerificationResult,
    VerificationStatus,
    generate_secret_key,
    issue_token,
    verify_token,
)

__all__ = [
    "TokenConfig",
    "TokenService",
    "IssuedToken",
    "VerificationResult",
    "VerificationStatus",
    "TokenError",
    "CipherError",
    "EnvelopeParseError",
    "generate_secret_key",
    "issue_token",
    "verify_token",
]
