"""
Response DTOs for captcha endpoints.

GenerateCaptchaResponse — GET /captcha/generate
Verification results use MessageResponse from responses.common.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GenerateCaptchaResponse(BaseModel):
    """Response body for GET /captcha/generate."""

    model_config = ConfigDict(populate_by_name=True)

    image: str  # data:image/png;base64,...
    token: str
