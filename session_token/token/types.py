"""Token datatypes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TokenEnvelope:
    """Plaintext sealed inside every token."""

    payload: Any
    created_at: int
    access_expired_at: Optional[int] = None
    refresher_expired_at: Optional[int] = None

    def access_expired(self, now: int) -> bool:
        return self.access_expired_at is not None and self.access_expired_at < now

    def refresher_expired(self, now: int) -> bool:
        return self.refresher_expired_at is not None and self.refresher_expired_at < now


@dataclass(frozen=True)
class IssuedToken:
    token: str
    key: str

    def to_dict(self) -> Dict[str, str]:
        return {"token": self.token, "key": self.key}


_STATUS_MESSAGES = {
    "Verified": "Token Verified",
    "VerifiedAccessExpired": "Token verified but access token expired!",
    "VerifiedAccessAndRefresherExpired": "Token verified but access token and refresher token expired!",
    "NotVerified": "Token not verifed!",
}


class VerificationStatus(str, Enum):
    """Temporal classification of a verified token."""

    VERIFIED = "Verified"
    ACCESS_EXPIRED = "VerifiedAccessExpired"
    ACCESS_AND_REFRESHER_EXPIRED = "VerifiedAccessAndRefresherExpired"
    NOT_VERIFIED = "NotVerified"

    @property
    def message(self) -> str:
        """Human-readable status text as emitted by earlier clients."""
        return _STATUS_MESSAGES[self.value]


class FailureKind(str, Enum):
    """Internal cause of a ``NotVerified`` outcome; never surfaced in ``to_dict``."""

    CIPHER_FAILURE = "cipher_failure"
    ENVELOPE_PARSE_FAILURE = "envelope_parse_failure"


@dataclass(frozen=True)
class VerificationResult:
    status: VerificationStatus
    payload: Any = None
    new_token: Optional[str] = None
    key: Optional[str] = None
    created_at: Optional[int] = None
    refreshed: bool = False
    reason: Optional[FailureKind] = None

    @classmethod
    def not_verified(cls, reason: FailureKind) -> "VerificationResult":
        return cls(VerificationStatus.NOT_VERIFIED, reason=reason)

    @property
    def verified(self) -> bool:
        return self.status is not VerificationStatus.NOT_VERIFIED

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the public result shape; failures carry only ``status``."""
        out: Dict[str, Any] = {"status": self.status.value}
        if not self.verified:
            return out
        out["payload"] = self.payload
        out["createdAt"] = self.created_at
        out["key"] = self.key
        out["newToken"] = self.new_token
        return out
