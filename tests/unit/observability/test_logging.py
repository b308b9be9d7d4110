"""Tests for structured logging and correlation context."""

import json
import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient

from nexlink.api.middleware import CorrelationMiddleware
from nexlink.observability.logging import (
    ConsoleFormatter,
    JsonFormatter,
    request_id_var,
    user_id_var,
)
from nexlink.observability.metrics import normalize_path


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="nexlink.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_basic_fields(self) -> None:
        data = json.loads(JsonFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "nexlink.test"
        assert data["message"] == "hello"
        assert "request_id" not in data

    def test_includes_context(self) -> None:
        request_token = request_id_var.set("req-1")
        user_token = user_id_var.set("MQ==")
        try:
            data = json.loads(JsonFormatter().format(_record()))
        finally:
            request_id_var.reset(request_token)
            user_id_var.reset(user_token)
        assert data["request_id"] == "req-1"
        assert data["user_id"] == "MQ=="

    def test_includes_extra_fields(self) -> None:
        record = _record()
        record.resource = "Investor"
        data = json.loads(JsonFormatter().format(record))
        assert data["resource"] == "Investor"


class TestConsoleFormatter:
    """Tests for ConsoleFormatter."""

    def test_plain_output(self) -> None:
        line = ConsoleFormatter(use_colors=False).format(_record("ready"))
        assert "| INFO" in line
        assert line.endswith("nexlink.test | ready")


class TestCorrelationMiddleware:
    """Tests for CorrelationMiddleware."""

    def _client(self) -> TestClient:
        app = FastAPI()
        app.add_middleware(CorrelationMiddleware)

        @app.get("/test")
        async def endpoint() -> dict[str, str]:
            return {"request_id": request_id_var.get(), "user_id": user_id_var.get()}

        return TestClient(app)

    def test_caller_token_starts_empty(self) -> None:
        assert self._client().get("/test").json()["user_id"] == ""

    def test_generates_request_id(self) -> None:
        response = self._client().get("/test")
        request_id = response.headers["x-request-id"]
        assert request_id
        assert response.json()["request_id"] == request_id
        assert response.headers["x-correlation-id"] == request_id

    def test_propagates_incoming_ids(self) -> None:
        response = self._client().get(
            "/test", headers={"x-request-id": "abc", "x-correlation-id": "flow-9"}
        )
        assert response.headers["x-request-id"] == "abc"
        assert response.headers["x-correlation-id"] == "flow-9"


class TestNormalizePath:
    """Tests for metric path normalization."""

    def test_replaces_tokens(self) -> None:
        assert normalize_path("/users/MQ==") == "/users/{id}"
        assert normalize_path("/investors/NjA=/unlock-status") == "/investors/{id}/unlock-status"

    def test_keeps_static_paths(self) -> None:
        assert normalize_path("/health/ready") == "/health/ready"
        assert normalize_path("/") == "/"

    def test_keeps_documentation_paths(self) -> None:
        assert normalize_path("/docs") == "/docs"
        assert normalize_path("/redoc") == "/redoc"
        assert normalize_path("/openapi.json") == "/openapi.json"
        assert normalize_path("/metrics") == "/metrics"

    def test_only_segment_after_collection_is_replaced(self) -> None:
        assert normalize_path("/users") == "/users"
        assert normalize_path("/investors/NjA=/unlock-status/") == "/investors/{id}/unlock-status"
