"""
Request DTOs for captcha endpoints.

VerifyCaptchaRequest — POST /captcha/verify
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VerifyCaptchaRequest(BaseModel):
    """Request body for POST /captcha/verify.

    Both fields are required and must be non-empty; nothing else is checked
    before the service sees them.
    """

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(min_length=1)
    text: str = Field(min_length=1)
