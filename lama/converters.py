"""
Conversions between API Gateway event/context pairs and server-style
request/response objects.
"""

from typing import Any, Iterable, Mapping, Optional, Tuple, Union

from .core.applier import to_http_response
from .core.request import GatewayHttpRequest
from .core.response import GatewayHttpResponse
from .core.serializer import serialize
from .exceptions import EventContextNotImplementedError
from .models.aws_v1 import APIGatewayProxyEvent


def to_event_context(request: Any, response: Any):
    """Convert a request/response pair into an event/context pair. Not implemented."""
    raise EventContextNotImplementedError()


async def to_request_response(
    event: Union[Mapping[str, Any], APIGatewayProxyEvent], context: Any
) -> Tuple[GatewayHttpRequest, GatewayHttpResponse]:
    """
    Convert an event/context pair into a request/response pair for server-style code.

    No server is started: both objects live in memory and are only useful for
    reading back with to_api_gateway_response once the response has ended.
    """
    return GatewayHttpRequest(event, context), GatewayHttpResponse()


def to_api_gateway_response(
    request: Optional[GatewayHttpRequest],
    response: GatewayHttpResponse,
    binary_mime_types: Optional[Iterable[str]] = None,
) -> dict:
    """Convert an ended response into an API Gateway friendly response dict."""
    return serialize(response, binary_mime_types)


__all__ = [
    "to_event_context",
    "to_request_response",
    "to_api_gateway_response",
    "to_http_response",
]
