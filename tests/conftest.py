"""
Pytest configuration and shared fixtures for the back-office training handlers.

Provides environment setup, a sample training manual on disk, API Gateway
events and a Lambda context used across unit and integration tests.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import pytest

MODULE_1 = """# MODULE 1: FOUNDATION AND CULTURE

# UNIT 1.1: Welcome to the Team
**Duration:** 2 hours
**Trainer:** Maria
**Location:** Front of house

## Purpose
Understand who we are and how we serve guests.

## Content

### Our Story
Founded in 2015.
We serve gyros.

**Core value:** Hospitality first

- Smile
- Greet within 30 seconds

### Activity 1: Shadow a Shift
Follow a shift lead for one hour.

# UNIT 1.2: Opening Procedures
**Duration:** 1 hour

## Purpose
Open the store safely.

## Steps

### Checklist
- Unlock doors
- Turn on grills
"""

MODULE_1_WORKBOOK = """# MODULE 1 REFLECTION WORKBOOK

# UNIT 1.1: Welcome to the Team
**1. What does hospitality mean to you?:**
_____
**2. Which value resonates most?:**

# UNIT 1.2: Opening Procedures
**1. What step is easiest to forget?:**
"""

MODULE_2 = """# MODULE 2: SERVICE

# UNIT 2.1: Taking Orders
Listen first.
"""


@pytest.fixture
def module_text() -> str:
    """Markdown of the sample module 1 document."""
    return MODULE_1


@pytest.fixture
def workbook_text() -> str:
    """Markdown of the sample module 1 reflection workbook."""
    return MODULE_1_WORKBOOK


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "ENVIRONMENT": "test",
        "POWERTOOLS_SERVICE_NAME": "test-backoffice-training",
        "POWERTOOLS_METRICS_NAMESPACE": "TestBackOffice",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
        "LAMBDA_ENV_MODELER_DISABLE_CACHE": "true",  # Re-read env vars on every call
    })


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the handler's cached training service between tests."""
    from backoffice.handlers import training_handler

    training_handler.training_service = None
    yield
    training_handler.training_service = None


@pytest.fixture
def manual_dir(tmp_path: Path) -> Path:
    """Write a small training manual to a temporary modules directory."""
    modules = tmp_path / "modules"
    modules.mkdir()
    (modules / "MODULE_1_FOUNDATION_AND_CULTURE.md").write_text(MODULE_1, encoding="utf-8")
    (modules / "MODULE_1_REFLECTION_WORKBOOK.md").write_text(MODULE_1_WORKBOOK, encoding="utf-8")
    (modules / "MODULE_2_SERVICE.md").write_text(MODULE_2, encoding="utf-8")
    return modules


@pytest.fixture
def training_env(manual_dir: Path, monkeypatch):
    """Point the handlers at the sample manual directory."""
    monkeypatch.setenv("TRAINING_MODULES_DIR", str(manual_dir))
    monkeypatch.delenv("TRAINING_BUCKET_NAME", raising=False)
    return manual_dir


@dataclass
class LambdaContextStub:
    function_name: str = "training-unit-function"
    function_version: str = "$LATEST"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:training-unit-function"
    aws_request_id: str = "test-request-id-123"
    log_group_name: str = "/aws/lambda/training-unit-function"
    log_stream_name: str = "2024/01/01/[$LATEST]test123"

    def get_remaining_time_in_millis(self) -> int:
        return 30000


@pytest.fixture
def lambda_context() -> LambdaContextStub:
    """Create a Lambda context for testing."""
    return LambdaContextStub()


@pytest.fixture
def api_gateway_event() -> Callable[..., Dict[str, Any]]:
    """Factory for API Gateway REST proxy events."""

    def make_event(
        path: str,
        method: str = "GET",
        body: Optional[Any] = None,
        query: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Dict[str, Any]:
        if body is not None and not isinstance(body, str):
            body = json.dumps(body)
        request_headers = {
            "Content-Type": "application/json",
            "User-Agent": "test-agent/1.0",
            **(headers or {}),
        }
        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": request_headers,
            "multiValueHeaders": {name: [value] for name, value in request_headers.items()},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "test-request-id-123",
                "accountId": "123456789012",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "resourcePath": path,
                "identity": {
                    "sourceIp": "127.0.0.1",
                    "userAgent": "test-agent/1.0",
                },
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return make_event


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
