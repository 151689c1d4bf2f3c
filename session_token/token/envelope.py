"""Envelope (de)serialization to the JSON plaintext sealed by the cipher."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from ..errors import EnvelopeParseError
from .types import TokenEnvelope


def serialize_envelope(envelope: TokenEnvelope) -> str:
    """Return compact JSON for ``envelope``, omitting absent expiry fields."""
    body: Dict[str, Any] = {"payload": envelope.payload, "createdAt": envelope.created_at}
    if envelope.access_expired_at is not None:
        body["accessExpiredAt"] = envelope.access_expired_at
    if envelope.refresher_expired_at is not None:
        body["refresherExpiredAt"] = envelope.refresher_expired_at
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


def _timestamp(body: Dict[str, Any], field: str, *, required: bool) -> Optional[int]:
    if field not in body:
        if required:
            raise EnvelopeParseError(f"Envelope is missing '{field}'.")
        return None
    value = body[field]
    if isinstance(value, bool) or not isinstance(value, int):
        raise EnvelopeParseError(f"Envelope field '{field}' must be an integer timestamp.")
    return value


def parse_envelope(plaintext: str) -> TokenEnvelope:
    """Parse decrypted plaintext back into a :class:`TokenEnvelope`."""
    try:
        body = json.loads(plaintext)
    except json.JSONDecodeError as exc:
        raise EnvelopeParseError("Envelope plaintext is not valid JSON.") from exc
    if not isinstance(body, dict):
        raise EnvelopeParseError("Envelope plaintext must be a JSON object.")
    if "payload" not in body:
        raise EnvelopeParseError("Envelope is missing 'payload'.")

    created_at = _timestamp(body, "createdAt", required=True)
    assert created_at is not None
    return TokenEnvelope(
        payload=body["payload"],
        created_at=created_at,
        access_expired_at=_timestamp(body, "accessExpiredAt", required=False),
        refresher_expired_at=_timestamp(body, "refresherExpiredAt", required=False),
    )
