"""Walk a session token through issue, access expiry and sliding refresh."""

from __future__ import annotations

import logging
import time

from session_token import TokenService, VerificationStatus


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    service = TokenService()

    issued = service.issue_token(
        {"user_id": "u-1029", "scope": ["read", "write"]},
        access_token_expired_in=200,
        refresher_expired_in=2_000,
        with_refresher=True,
    )
    print("issued with generated key:", issued.key)

    result = service.verify_token(issued.token, issued.key)
    print("immediately:", result.status.message)

    time.sleep(0.3)
    result = service.verify_token(issued.token, issued.key, is_key_random=True, random_key_length=12)
    print("after access window:", result.status.message, "| refreshed:", result.refreshed)

    if result.status is VerificationStatus.ACCESS_EXPIRED and result.refreshed:
        again = service.verify_token(result.new_token, result.key)
        print("refreshed token:", again.status.message, again.payload)

    time.sleep(2.1)
    final = service.verify_token(result.new_token, result.key)
    print("after refresh window:", final.status.message)


if __name__ == "__main__":
    main()
