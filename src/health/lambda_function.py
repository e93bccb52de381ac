"""
Health Check Lambda Function - Dedicated health monitoring endpoint.

Reports whether the training manual store can be read and whether the Lambda
environment carries the configuration the training handlers expect.
"""

import json
import os
import sys
import time
from datetime import datetime, timezone
from typing import Any, Dict

# Add the backoffice package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from backoffice.dal import get_manual_store
from backoffice.handlers.models.env_vars import get_handler_env_vars
from backoffice.handlers.utils.rest_api_resolver import create_api_response
from backoffice.models.output import HealthCheckOutput

logger = Logger(service="health-check")
tracer = Tracer(service="health-check")
metrics = Metrics(namespace="BackOffice/Health", service="health-check")

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, no-store, must-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}


@tracer.capture_method
def check_manual_store_health() -> Dict[str, Any]:
    """
    Check that the training manual store is reachable.

    Returns:
        Health check results for the manual store
    """
    try:
        start_time = time.time()

        store = get_manual_store(get_handler_env_vars())
        health_result = store.health_check()

        response_time = (time.time() - start_time) * 1000
        metrics.add_metric(name="ManualStoreHealthCheckDuration", unit=MetricUnit.Milliseconds, value=response_time)

        return {
            "component": "manual_store",
            "status": health_result.get("status", "unknown"),
            "response_time_ms": round(response_time, 2),
            "details": health_result,
        }

    except Exception as e:
        logger.error("Manual store health check failed", extra={"error": str(e)})
        metrics.add_metric(name="ManualStoreHealthCheckFailure", unit=MetricUnit.Count, value=1)

        return {
            "component": "manual_store",
            "status": "unhealthy",
            "error": str(e),
            "response_time_ms": 0,
        }


def check_lambda_environment() -> Dict[str, Any]:
    """
    Check that the environment the handlers rely on is set and valid.

    The document source is read from the resolved handler configuration, so
    the default modules directory counts as configured.

    Returns:
        Health check results for the Lambda environment
    """
    required_env_vars = ['POWERTOOLS_SERVICE_NAME', 'ENVIRONMENT']
    missing_vars = [var for var in required_env_vars if not os.environ.get(var)]

    details: Dict[str, Any] = {
        "function_name": os.environ.get('AWS_LAMBDA_FUNCTION_NAME', 'unknown'),
        "runtime": os.environ.get('AWS_EXECUTION_ENV', 'unknown'),
        "missing_env_vars": missing_vars,
    }

    configuration_valid = True
    try:
        env_vars = get_handler_env_vars()
        if env_vars.uses_s3:
            details["document_source"] = f"s3://{env_vars.TRAINING_BUCKET_NAME}/{env_vars.TRAINING_KEY_PREFIX}"
        else:
            details["document_source"] = env_vars.TRAINING_MODULES_DIR
    except ValueError as e:
        logger.warning("Handler configuration is invalid", extra={"error": str(e)})
        configuration_valid = False
        details["configuration_error"] = str(e)

    return {
        "component": "lambda_environment",
        "status": "healthy" if not missing_vars and configuration_valid else "degraded",
        "details": details,
    }


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda handler for health check endpoint.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response with health check results
    """
    metrics.add_metric(name="HealthCheckRequestCount", unit=MetricUnit.Count, value=1)
    tracer.put_annotation("service", "health-check")

    try:
        query_params = event.get('queryStringParameters') or {}
        include_details = query_params.get('include_details', 'false').lower() == 'true'

        health_checks = [check_manual_store_health(), check_lambda_environment()]

        unhealthy = [check for check in health_checks if check.get("status") == "unhealthy"]
        degraded = [check for check in health_checks if check.get("status") == "degraded"]

        if unhealthy:
            overall_status, status_code = "unhealthy", 503
        elif degraded:
            overall_status, status_code = "degraded", 200
        else:
            overall_status, status_code = "healthy", 200

        health_response = HealthCheckOutput(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            environment=os.environ.get("ENVIRONMENT", "unknown"),
            checks={
                "total": len(health_checks),
                "unhealthy": len(unhealthy),
                "degraded": len(degraded),
            },
            details={"components": health_checks} if include_details else None,
        )

        logger.info("Health check completed", extra={
            "overall_status": overall_status,
            "unhealthy_components": len(unhealthy),
            "degraded_components": len(degraded),
        })

        return create_api_response(
            status_code=status_code,
            body=health_response.model_dump_json(exclude_none=True),
            headers=NO_CACHE_HEADERS,
        )

    except Exception as e:
        metrics.add_metric(name="HealthCheckError", unit=MetricUnit.Count, value=1)
        logger.exception("Health check failed with unexpected error", extra={"error": str(e)})

        error_response = {
            "status": "unhealthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "error": {
                "code": "HEALTH_CHECK_FAILED",
                "message": "Health check encountered an unexpected error",
                "error_id": context.aws_request_id,
            },
        }
        return create_api_response(status_code=503, body=json.dumps(error_response), headers=NO_CACHE_HEADERS)
