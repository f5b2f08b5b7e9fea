"""Image captcha implementation of CaptchaService.

Rendering is delegated to ``captcha.image.ImageCaptcha`` and token signing
to PyJWT (HS256). The service holds no per-challenge state: everything
needed to verify an answer travels inside the signed token.
"""

from __future__ import annotations

import base64
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Optional, Sequence

import jwt
from captcha.image import ImageCaptcha

from errors import CaptchaGenerationError, CaptchaVerificationError
from infrastructure.captcha.protocol import Challenge
from shared.crypto import answers_match, hash_answer
from shared.generators import (
    DEFAULT_CAPTCHA_ALPHABET,
    generate_captcha_text,
    generate_secure_token,
)
from shared.logging import get_logger

if TYPE_CHECKING:
    from config import CaptchaSettings

log = get_logger(__name__)

_ALGORITHM = "HS256"
_SUBJECT = "captcha"


class ImageCaptchaService:
    def __init__(
        self,
        secret_key: str,
        *,
        length: int = 6,
        alphabet: str = DEFAULT_CAPTCHA_ALPHABET,
        width: int = 240,
        height: int = 80,
        fonts: Optional[Sequence[str]] = None,
        ttl_seconds: int = 300,
        case_sensitive: bool = False,
    ) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._secret = secret_key
        self._length = length
        self._alphabet = alphabet
        self._ttl = timedelta(seconds=ttl_seconds)
        self._case_sensitive = case_sensitive
        self._renderer = ImageCaptcha(
            width=width, height=height, fonts=list(fonts) if fonts else None
        )

    @classmethod
    def from_settings(cls, settings: "CaptchaSettings") -> "ImageCaptchaService":
        """Build from a CaptchaSettings instance (secret must already be resolved)."""
        return cls(
            settings.captcha_secret_key,
            length=settings.captcha_length,
            alphabet=settings.captcha_alphabet,
            width=settings.captcha_image_width,
            height=settings.captcha_image_height,
            fonts=settings.captcha_fonts,
            ttl_seconds=settings.captcha_ttl_seconds,
            case_sensitive=settings.captcha_case_sensitive,
        )

    def generate(self) -> Challenge:
        try:
            text = generate_captcha_text(self._length, self._alphabet)
            png = self._renderer.generate(text, format="png")
            image = "data:image/png;base64," + base64.b64encode(png.getvalue()).decode("ascii")
            token = self._sign(text)
        except Exception as e:
            log.error(
                "captcha_generation_failed", error=str(e), error_type=type(e).__name__
            )
            raise CaptchaGenerationError("Failed to generate captcha") from e
        return Challenge(image=image, text=text, token=token)

    def verify(self, text: str, token: str) -> None:
        if not token:
            raise CaptchaVerificationError(reason="empty_token")
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[_ALGORITHM],
                options={"require": ["exp", "iat", "sub"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise CaptchaVerificationError(reason="expired") from e
        except (jwt.InvalidTokenError, UnicodeError) as e:
            raise CaptchaVerificationError(reason="invalid_token") from e

        expected = claims.get("ans")
        if claims.get("sub") != _SUBJECT or not isinstance(expected, str):
            raise CaptchaVerificationError(reason="invalid_token")
        if not answers_match(expected, self._secret, text, self._case_sensitive):
            raise CaptchaVerificationError(reason="mismatch")

    def _sign(self, text: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": _SUBJECT,
            "ans": hash_answer(self._secret, text, self._case_sensitive),
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
            "jti": generate_secure_token(12),
        }
        return jwt.encode(claims, self._secret, algorithm=_ALGORITHM)
