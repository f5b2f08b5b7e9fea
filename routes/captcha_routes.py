"""
Captcha endpoints.

GET  /captcha/generate — new challenge image plus signed token.
POST /captcha/verify   — check the text a client read back against a token.
Rules:
- Any generation failure → 500 with a generic message.
- Missing or empty body fields → 400 (request validation, service untouched).
- Any verification failure → 401 with a generic message; the reason is
  only logged.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from dependencies import get_captcha_service
from errors import CaptchaGenerationError, CaptchaVerificationError
from infrastructure.captcha.protocol import CaptchaService
from schemas.dto.requests.captcha import VerifyCaptchaRequest
from schemas.dto.responses.captcha import GenerateCaptchaResponse
from schemas.dto.responses.common import ErrorResponse, MessageResponse
from shared.logging import get_logger

log = get_logger(__name__)

router = APIRouter(prefix="/captcha", tags=["captcha"])


@router.get(
    "/generate",
    response_model=GenerateCaptchaResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Generate Captcha",
)
async def generate_captcha(
    captcha_service: CaptchaService = Depends(get_captcha_service),
) -> GenerateCaptchaResponse:
    """Generates a new base64 captcha image and a corresponding token."""
    try:
        # Rendering is CPU bound; keep it off the event loop
        challenge = await run_in_threadpool(captcha_service.generate)
    except CaptchaGenerationError:
        raise
    except Exception as e:
        log.error(
            "captcha_generation_failed", error=str(e), error_type=type(e).__name__
        )
        raise CaptchaGenerationError("Failed to generate captcha") from e

    log.debug("captcha_generated")
    return GenerateCaptchaResponse(image=challenge.image, token=challenge.token)


@router.post(
    "/verify",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": MessageResponse}},
    summary="Verify Captcha",
)
async def verify_captcha(
    body: VerifyCaptchaRequest,
    captcha_service: CaptchaService = Depends(get_captcha_service),
) -> MessageResponse:
    """Verifies if the provided captcha text matches the token."""
    try:
        captcha_service.verify(body.text, body.token)
    except CaptchaVerificationError as e:
        log.info("captcha_verification_failed", reason=e.reason)
        raise CaptchaVerificationError() from e
    except Exception as e:
        log.warning(
            "captcha_verification_error", error=str(e), error_type=type(e).__name__
        )
        raise CaptchaVerificationError(reason="error") from e

    log.info("captcha_verified")
    return MessageResponse(success=True, message="Captcha verified successfully")
