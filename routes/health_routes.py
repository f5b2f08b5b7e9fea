"""
Health check endpoint.

GET /health — reports whether a captcha service is wired.
Rules:
- No captcha service → "unhealthy" (503) — nothing can be issued or verified.
- Otherwise "healthy" (200). No challenge is rendered; the check stays cheap.
"""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from schemas.dto.responses.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse, responses={503: {"model": HealthResponse}})
async def health_check(request: Request) -> JSONResponse:
    checks: dict[str, str] = {}
    overall = "healthy"

    if getattr(request.app.state, "captcha_service", None) is None:
        checks["captcha"] = "not_configured"
        overall = "unhealthy"
    else:
        checks["captcha"] = "ok"

    status_code = 503 if overall == "unhealthy" else 200
    return JSONResponse(
        status_code=status_code,
        content=HealthResponse(status=overall, checks=checks).model_dump(),
    )
