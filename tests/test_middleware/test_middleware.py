"""
Test suite for error formatting, the fallback error middleware and request
logging.

Version: 1.0
"""

import logging
import pytest

from credential_service.api.dependencies import get_credential_store
from credential_service.core.logging import PIIMasker
from credential_service.main import metrics_registry
from credential_service.middleware.error_handler import format_validation_errors
from credential_service.middleware.logging_middleware import TRACE_HEADER, should_log_path

class TestFormatValidationErrors:

    def test_field_errors_carry_param_and_location(self):
        errors = [
            {"type": "name_required", "loc": ("body", "name"), "msg": "Please enter your name", "input": None},
        ]

        assert format_validation_errors(errors) == [
            {"msg": "Please enter your name", "param": "name", "location": "body"}
        ]

    def test_submitted_values_are_not_echoed(self):
        errors = [
            {"type": "password_too_short", "loc": ("body", "password"), "msg": "too short", "input": "abc"},
        ]

        assert "abc" not in str(format_validation_errors(errors))

    def test_body_level_error_has_no_param(self):
        errors = [{"type": "missing", "loc": ("body",), "msg": "Field required", "input": None}]

        assert format_validation_errors(errors) == [
            {"msg": "Field required", "param": None, "location": "body"}
        ]

class TestPIIMasker:

    def test_masks_emails_and_redacts_secrets(self):
        masked = PIIMasker.mask_pii({"email": "ann@x.com", "password": "secret1", "nested": ["bob@x.com"]})

        assert masked == {
            "email": "[MASKED_EMAIL]",
            "password": "[REDACTED]",
            "nested": ["[MASKED_EMAIL]"],
        }

class TestLoggingMiddleware:

    @pytest.mark.parametrize("path,expected", [
        ("/api/users", True),
        ("/", True),
        ("/metrics", False),
        ("/static/app.js", False),
    ])
    def test_should_log_path(self, path, expected):
        assert should_log_path(path) is expected

    @pytest.mark.asyncio
    async def test_trace_id_header_is_set(self, async_client):
        response = await async_client.get("/")

        assert response.headers[TRACE_HEADER]

    @pytest.mark.asyncio
    async def test_incoming_trace_id_is_kept(self, async_client):
        response = await async_client.get("/", headers={TRACE_HEADER: "trace-123"})

        assert response.headers[TRACE_HEADER] == "trace-123"

class TestErrorHandlerMiddleware:

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_opaque_500(self, test_app, async_client, mocker, caplog):
        broken_store = mocker.Mock()
        broken_store.register = mocker.AsyncMock(side_effect=RuntimeError("driver exploded at 10.0.0.5"))
        test_app.dependency_overrides[get_credential_store] = lambda: broken_store

        with caplog.at_level(logging.ERROR, logger="request"):
            response = await async_client.post(
                "/api/users",
                json={"name": "Ann", "email": "ann@x.com", "password": "secret1"}
            )

        assert response.status_code == 500
        assert response.text == "Server error"
        assert "driver exploded" not in response.text
        assert any("Unhandled error during request" in r.getMessage() for r in caplog.records)

class TestRequestMetrics:

    @staticmethod
    def _count(method, endpoint, status):
        value = metrics_registry.get_sample_value(
            "http_requests_total",
            {"method": method, "endpoint": endpoint, "status": status}
        )
        return value or 0

    @pytest.mark.asyncio
    async def test_requests_are_labelled_by_route_template(self, async_client):
        before = self._count("POST", "/api/users", "400")

        await async_client.post("/api/users", json={})

        assert self._count("POST", "/api/users", "400") == before + 1

    @pytest.mark.asyncio
    async def test_unknown_paths_share_one_series(self, async_client):
        before = self._count("GET", "unmatched", "404")

        await async_client.get("/wp-admin/setup.php")
        await async_client.get("/.env")

        assert self._count("GET", "unmatched", "404") == before + 2
        assert metrics_registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "endpoint": "/.env", "status": "404"}
        ) is None
