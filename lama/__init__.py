"""
lama: run server-style request/response code behind API Gateway event/context invocations.
"""

from .converters import (
    to_api_gateway_response,
    to_event_context,
    to_http_response,
    to_request_response,
)
from .handler import create_lambda_handler, invoke

__all__ = [
    "to_event_context",
    "to_request_response",
    "to_api_gateway_response",
    "to_http_response",
    "create_lambda_handler",
    "invoke",
]
