"""
REST API resolver utility for the back-office Lambda handlers.

Provides the configured API Gateway REST resolver, path constants and the
response helpers shared by every route.
"""

import json
import uuid
from typing import Any, Dict, Optional

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, CORSConfig, Response, content_types

# API path constants
TRAINING_UNIT_PATH = '/training/unit'
MODULE_UNITS_PATH = '/training/modules/<module_number>/units'
MODULE_UNIT_PATH = '/training/modules/<module_number>/units/<unit_number>'

CORS_ALLOW_HEADERS = ['Content-Type', 'X-Amz-Date', 'Authorization', 'X-Api-Key', 'X-Amz-Security-Token']

cors_config = CORSConfig(
    allow_origin='*',
    max_age=600,
    allow_headers=CORS_ALLOW_HEADERS,
)

app = APIGatewayRestResolver(cors=cors_config, debug=False)


def json_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """Build a JSON resolver response from a string, dict or pydantic model."""
    if hasattr(body, 'model_dump_json'):
        payload = body.model_dump_json()
    elif isinstance(body, str):
        payload = body
    else:
        payload = json.dumps(body)

    return Response(
        status_code=status_code,
        content_type=content_types.APPLICATION_JSON,
        body=payload,
        headers=headers,
    )


def create_api_response(
    status_code: int,
    body: Any,
    headers: Optional[Dict[str, str]] = None,
    cors_enabled: bool = True,
) -> Dict[str, Any]:
    """Create a raw API Gateway proxy response, for handlers without the resolver."""
    default_headers = {
        "Content-Type": "application/json",
        "X-Request-ID": str(uuid.uuid4()),
    }

    if cors_enabled:
        default_headers.update({
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Headers": ",".join(CORS_ALLOW_HEADERS),
            "Access-Control-Allow-Methods": "OPTIONS,POST,GET",
        })

    if headers:
        default_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": default_headers,
        "body": body if isinstance(body, str) else json.dumps(body),
    }
