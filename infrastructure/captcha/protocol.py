"""CaptchaService protocol — routes depend on this, not the concrete implementation."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Challenge:
    """A freshly generated captcha. Never persisted."""

    image: str  # data:image/png;base64,... URI
    text: str  # expected answer; only the digest travels inside the token
    token: str


class CaptchaService(Protocol):
    def generate(self) -> Challenge:
        """Raises CaptchaGenerationError if the challenge cannot be produced."""
        ...

    def verify(self, text: str, token: str) -> None:
        """Raises CaptchaVerificationError unless *text* answers *token*."""
        ...
