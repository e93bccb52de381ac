"""
Training Handler - Lambda function for the training content API.

Routes API Gateway requests for training units to the training service,
validating request shapes at the boundary and mapping service errors to
structured JSON error responses.
"""

import functools
import json
import os
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import Response
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from backoffice.dal import get_manual_store
from backoffice.handlers.models.env_vars import get_handler_env_vars
from backoffice.handlers.utils.errors import (
    BaseServiceError,
    ErrorCategory,
    ErrorContext,
    ErrorSeverity,
    ValidationError as ServiceValidationError,
    create_error_context,
    format_error_response,
    get_http_status_code,
    log_error_metrics,
)
from backoffice.handlers.utils.observability import logger, metrics, tracer
from backoffice.handlers.utils.rest_api_resolver import (
    MODULE_UNIT_PATH,
    MODULE_UNITS_PATH,
    TRAINING_UNIT_PATH,
    app,
    create_api_response,
    json_response,
)
from backoffice.logic.training_service import TrainingService
from backoffice.models.input import GetUnitRequest, ListUnitsRequest
from backoffice.models.output import GetUnitOutput, ListUnitsOutput

# Built on first use so every cold start reads the current environment
training_service: Optional[TrainingService] = None


def get_training_service() -> TrainingService:
    """Get or create the training service for this execution environment."""
    global training_service

    if training_service is None:
        env_vars = get_handler_env_vars()
        training_service = TrainingService(
            manual_store=get_manual_store(env_vars),
            max_module=env_vars.MAX_MODULE_NUMBER,
            max_unit=env_vars.MAX_UNIT_NUMBER,
            default_trainer=env_vars.DEFAULT_TRAINER,
        )

    return training_service


def handle_service_errors(func):
    """Decorator to handle service errors and convert to HTTP responses."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BaseServiceError as e:
            log_error_metrics(e)
            return json_response(
                status_code=get_http_status_code(e),
                body=format_error_response(e, include_details=not get_handler_env_vars().is_production),
            )

        except ValidationError as e:
            # Pydantic validation errors raised by request models
            logger.error("Request validation failed", extra={
                "validation_errors": str(e),
                "error_count": e.error_count(),
            })
            metrics.add_metric(name="ValidationError", unit=MetricUnit.Count, value=1)

            field_errors = [
                {"field": str(error["loc"][-1]) if error["loc"] else "body", "message": error["msg"]}
                for error in e.errors()
            ]
            validation_error = ServiceValidationError(
                message="Request validation failed",
                field_errors=field_errors,
            )
            return json_response(status_code=400, body=format_error_response(validation_error))

        except Exception as e:
            logger.exception("Unexpected error in handler", extra={
                "error": str(e),
                "function_name": func.__name__,
            })
            metrics.add_metric(name="UnexpectedError", unit=MetricUnit.Count, value=1)

            unexpected_error = BaseServiceError(
                message="An unexpected error occurred",
                error_code="INTERNAL_SERVER_ERROR",
                severity=ErrorSeverity.CRITICAL,
                category=ErrorCategory.INFRASTRUCTURE,
            )
            return json_response(status_code=500, body=format_error_response(unexpected_error))

    return wrapper


def _request_context(operation: str, resource_id: Optional[str] = None) -> ErrorContext:
    request_context = app.current_event.request_context
    request_id = request_context.request_id if request_context else "unknown"
    return create_error_context(
        request_id=request_id or "unknown",
        operation=operation,
        resource_id=resource_id,
    )


def _unit_response(request: GetUnitRequest, context: ErrorContext) -> Response:
    tracer.put_annotation("module_number", request.module_number)
    tracer.put_annotation("unit_number", request.unit_number)

    unit = get_training_service().get_unit(
        module_number=request.module_number,
        unit_number=request.unit_number,
        context=context,
    )
    metrics.add_metric(name="UnitServed", unit=MetricUnit.Count, value=1)

    return json_response(status_code=200, body=GetUnitOutput(unit=unit))


@app.post(TRAINING_UNIT_PATH)
@tracer.capture_method
@handle_service_errors
def get_unit_from_body() -> Response:
    """
    Get a training unit from a JSON body of ``module_number`` and ``unit_number``.

    Returns:
        The parsed unit with its reflection questions
    """
    logger.info("Training unit request received")
    context = _request_context(operation="get_unit")

    try:
        request_body = json.loads(app.current_event.body or "{}")
    except json.JSONDecodeError:
        raise ServiceValidationError(
            message="Invalid JSON in request body",
            context=context,
        )

    if not isinstance(request_body, dict):
        raise ServiceValidationError(message="Request body must be a JSON object", context=context)

    missing = [field for field in ("module_number", "unit_number") if request_body.get(field) in (None, "")]
    if missing:
        raise ServiceValidationError(
            message="module_number and unit_number are required",
            field_errors=[{"field": field, "message": "Field required"} for field in missing],
            context=context,
        )

    return _unit_response(GetUnitRequest.model_validate(request_body), context)


@app.get(MODULE_UNIT_PATH)
@tracer.capture_method
@handle_service_errors
def get_unit(module_number: str, unit_number: str) -> Response:
    """
    Get a training unit addressed by path parameters.

    Args:
        module_number: Module number path segment
        unit_number: Unit number path segment
    """
    logger.info("Training unit request received", extra={
        "module_number": module_number,
        "unit_number": unit_number,
    })
    context = _request_context(operation="get_unit", resource_id=f"{module_number}.{unit_number}")

    request = GetUnitRequest.model_validate({"module_number": module_number, "unit_number": unit_number})
    return _unit_response(request, context)


@app.get(MODULE_UNITS_PATH)
@tracer.capture_method
@handle_service_errors
def list_units(module_number: str) -> Response:
    """List the units available in a module."""
    logger.info("Module unit listing requested", extra={"module_number": module_number})
    context = _request_context(operation="list_units", resource_id=module_number)

    request = ListUnitsRequest.model_validate({"module_number": module_number})
    tracer.put_annotation("module_number", request.module_number)

    units = get_training_service().list_units(request.module_number, context=context)

    logger.info("Module units listed", extra={
        "module_number": request.module_number,
        "unit_count": len(units),
    })
    return json_response(
        status_code=200,
        body=ListUnitsOutput(module_number=request.module_number, units=units),
    )


@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@metrics.log_metrics(capture_cold_start_metric=True)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Lambda event payload
        context: Lambda context object

    Returns:
        API Gateway response
    """
    try:
        metrics.add_metric(name="UnitRequestCount", unit=MetricUnit.Count, value=1)

        tracer.put_annotation("service", "training-api")
        tracer.put_annotation("environment", os.environ.get("ENVIRONMENT", "unknown"))

        return app.resolve(event, context)

    except Exception as e:
        metrics.add_metric(name="RequestError", unit=MetricUnit.Count, value=1)

        logger.exception("Unhandled error in lambda handler", extra={"error": str(e)})

        error_response = {
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
                "error_id": context.aws_request_id,
            }
        }

        return create_api_response(status_code=500, body=error_response)
