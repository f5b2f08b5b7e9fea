"""Unit tests for request and response DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from schemas.dto.requests.captcha import VerifyCaptchaRequest
from schemas.dto.responses.captcha import GenerateCaptchaResponse
from schemas.dto.responses.common import ErrorResponse, HealthResponse, MessageResponse


class TestVerifyCaptchaRequest:
    def test_valid(self):
        req = VerifyCaptchaRequest(token="tok-xyz", text="AB12")
        assert req.token == "tok-xyz"
        assert req.text == "AB12"

    @pytest.mark.parametrize(
        "payload",
        [
            {"token": "tok-xyz"},
            {"text": "AB12"},
            {},
            {"token": "", "text": "AB12"},
            {"token": "tok-xyz", "text": ""},
        ],
        ids=["missing_text", "missing_token", "empty_body", "empty_token", "empty_text"],
    )
    def test_required_fields(self, payload):
        with pytest.raises(ValidationError):
            VerifyCaptchaRequest(**payload)

    def test_extra_fields_ignored(self):
        req = VerifyCaptchaRequest.model_validate(
            {"token": "t", "text": "x", "extra": 1}
        )
        assert not hasattr(req, "extra")


class TestResponses:
    def test_generate_response_dump(self):
        resp = GenerateCaptchaResponse(image="data:image/png;base64,abc", token="t")
        assert resp.model_dump() == {"image": "data:image/png;base64,abc", "token": "t"}

    def test_message_response_defaults(self):
        assert MessageResponse(success=False).message is None

    def test_error_response_optional_fields(self):
        err = ErrorResponse(error="bad", code="validation_error")
        assert err.field is None
        assert err.details is None

    def test_health_response(self):
        h = HealthResponse(status="healthy", checks={"captcha": "ok"})
        assert h.checks["captcha"] == "ok"
