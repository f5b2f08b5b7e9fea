"""
FastAPI dependency providers.

All injectable dependencies are defined here as plain functions used with
FastAPI's Depends() system. Tests swap implementations by assigning to
app.state before issuing requests.
"""

from __future__ import annotations

from fastapi import Request

from infrastructure.captcha.protocol import CaptchaService


def get_captcha_service(request: Request) -> CaptchaService:
    """Return the CaptchaService wired into app.state by create_app()."""
    return request.app.state.captcha_service
