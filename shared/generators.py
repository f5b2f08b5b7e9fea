"""
Random text and token generators — pure, side-effect-free functions.

All generators use cryptographically secure sources (``secrets`` module):
challenge text must not be predictable from earlier challenges.
"""

from __future__ import annotations

import secrets

DEFAULT_CAPTCHA_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"


def generate_captcha_text(length: int = 6, alphabet: str = DEFAULT_CAPTCHA_ALPHABET) -> str:
    """Generate the answer text for a new challenge.

    Args:
        length: Number of characters (default 6).
        alphabet: Characters to draw from.

    Returns:
        Random string of the requested length.
    """
    if length < 1:
        raise ValueError("length must be positive")
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def generate_secure_token(length: int = 32) -> str:
    """Generate a cryptographically secure URL-safe random token.

    Args:
        length: Number of random bytes before base64 encoding (default 32).
            The resulting string will be longer than *length* characters.

    Returns:
        URL-safe base64-encoded token string.
    """
    return secrets.token_urlsafe(length)
