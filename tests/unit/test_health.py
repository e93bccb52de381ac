"""
Unit tests for the health check Lambda function.
"""

import importlib.util
import json
from pathlib import Path

import pytest

HEALTH_FUNCTION = Path(__file__).parents[2] / "src" / "health" / "lambda_function.py"


@pytest.fixture
def health_module():
    """Load the health Lambda entry point from its function directory."""
    spec = importlib.util.spec_from_file_location("health_lambda_function", HEALTH_FUNCTION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestHealthCheck:
    """Test cases for the health check handler."""

    def test_healthy(self, health_module, training_env, api_gateway_event, lambda_context):
        response = health_module.lambda_handler(api_gateway_event("/health"), lambda_context)

        assert response["statusCode"] == 200
        assert response["headers"]["Cache-Control"] == "no-cache, no-store, must-revalidate"
        body = json.loads(response["body"])
        assert body["status"] == "healthy"
        assert body["checks"] == {"total": 2, "unhealthy": 0, "degraded": 0}
        assert "details" not in body

    def test_unhealthy_store(self, health_module, tmp_path, monkeypatch, api_gateway_event, lambda_context):
        monkeypatch.setenv("TRAINING_MODULES_DIR", str(tmp_path / "missing"))

        response = health_module.lambda_handler(api_gateway_event("/health"), lambda_context)

        assert response["statusCode"] == 503
        assert json.loads(response["body"])["status"] == "unhealthy"

    def test_include_details(self, health_module, training_env, api_gateway_event, lambda_context):
        event = api_gateway_event("/health", query={"include_details": "true"})

        response = health_module.lambda_handler(event, lambda_context)

        components = json.loads(response["body"])["details"]["components"]
        assert [component["component"] for component in components] == ["manual_store", "lambda_environment"]

    def test_lambda_environment_degraded_without_service_name(self, health_module, training_env, monkeypatch):
        monkeypatch.delenv("POWERTOOLS_SERVICE_NAME", raising=False)

        result = health_module.check_lambda_environment()

        assert result["status"] == "degraded"
        assert result["details"]["missing_env_vars"] == ["POWERTOOLS_SERVICE_NAME"]

    def test_default_modules_directory_counts_as_configured(self, health_module, monkeypatch):
        monkeypatch.delenv("TRAINING_MODULES_DIR", raising=False)
        monkeypatch.delenv("TRAINING_BUCKET_NAME", raising=False)

        result = health_module.check_lambda_environment()

        assert result["status"] == "healthy"
        assert result["details"]["missing_env_vars"] == []
        assert result["details"]["document_source"] == "training/modules"

    def test_bucket_is_reported_as_document_source(self, health_module, monkeypatch):
        monkeypatch.setenv("TRAINING_BUCKET_NAME", "training-bucket")

        result = health_module.check_lambda_environment()

        assert result["details"]["document_source"] == "s3://training-bucket/training/modules/"

    def test_invalid_configuration_is_degraded(self, health_module, training_env, monkeypatch):
        monkeypatch.setenv("MAX_UNIT_NUMBER", "0")

        result = health_module.check_lambda_environment()

        assert result["status"] == "degraded"
        assert "configuration_error" in result["details"]
