"""Password digests and constant-time comparisons."""

import hashlib
import hmac
from typing import Optional


def hash_password(password: str, salt: str) -> str:
    return hashlib.sha256((salt + password).encode("utf-8")).hexdigest()


def verify_password(password: str, digest: str, salt: str) -> bool:
    return hmac.compare_digest(hash_password(password, salt), digest)


def secrets_match(given: Optional[str], expected: Optional[str]) -> bool:
    """Compare two secrets; an unset expected value never matches."""
    if not given or not expected:
        return False
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))
