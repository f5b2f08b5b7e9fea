"""Integration tests for GET /health."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from errors import register_error_handlers
from routes.health_routes import router as health_router
from schemas.dto.responses.common import HealthResponse


def _build_test_app(captcha_service=None) -> FastAPI:
    """Build a minimal FastAPI app with the service injected via app.state."""
    app = FastAPI()
    app.state.captcha_service = captcha_service
    register_error_handlers(app)
    app.include_router(health_router)
    return app


class TestHealthEndpoint:
    def test_healthy_when_service_wired(self, fake_service):
        with TestClient(_build_test_app(fake_service)) as client:
            resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body == {"status": "healthy", "checks": {"captcha": "ok"}}

    def test_unhealthy_without_service(self):
        with TestClient(_build_test_app(None)) as client:
            resp = client.get("/health")
        assert resp.status_code == 503
        health = HealthResponse(**resp.json())
        assert health.status == "unhealthy"
        assert health.checks["captcha"] == "not_configured"

    def test_health_on_full_app(self, make_client, fake_service):
        resp = make_client(fake_service).get("/health")
        assert resp.status_code == 200
        assert fake_service.generate_calls == 0


def test_health_schema_is_documented(make_client, fake_service):
    schema = make_client(fake_service).get("/openapi.json").json()
    ref = schema["paths"]["/health"]["get"]["responses"]["200"]["content"]["application/json"]["schema"]
    assert ref["$ref"].endswith("/HealthResponse")
