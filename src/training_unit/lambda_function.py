"""
Training Unit Lambda Function - Entry point for the training content API.

Delegates to the training handler, which routes unit lookups and module
listings through the three-layer architecture.
"""

import os
import sys
from typing import Any, Dict

# Add the backoffice package to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_lambda_powertools.utilities.typing import LambdaContext
from backoffice.handlers.training_handler import lambda_handler as training_handler


def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Lambda function entry point for the training content API.

    Args:
        event: Lambda event payload (API Gateway event)
        context: Lambda context object

    Returns:
        API Gateway response dictionary
    """
    return training_handler(event, context)
