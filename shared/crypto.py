"""
Cryptographic helpers for challenge tokens.

Answers are never embedded in a token in the clear: the token carries an
HMAC-SHA256 digest of the normalised answer, keyed by the signing secret.
"""

from __future__ import annotations

import hashlib
import hmac


def normalize_answer(text: str, case_sensitive: bool = False) -> str:
    """Strip surrounding whitespace and, unless *case_sensitive*, upper-case."""
    text = (text or "").strip()
    return text if case_sensitive else text.upper()


def hash_answer(secret: str, text: str, case_sensitive: bool = False) -> str:
    """Return the hex HMAC-SHA256 of the normalised *text* keyed by *secret*.

    Returns:
        64-character lowercase hex string.
    """
    normalized = normalize_answer(text, case_sensitive)
    return hmac.new(
        secret.encode("utf-8"), normalized.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def answers_match(expected_digest: str, secret: str, text: str, case_sensitive: bool = False) -> bool:
    """Constant-time comparison of *text* against a digest from :func:`hash_answer`."""
    try:
        candidate = hash_answer(secret, text, case_sensitive)
    except UnicodeError:
        return False
    return hmac.compare_digest(expected_digest, candidate)
