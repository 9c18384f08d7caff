"""
Core logic package.

Provides the synthetic request/response objects and the conversions around them.
"""

from .applier import JSONResponseWriter, to_http_response
from .content_type import is_binary, normalize
from .request import (
    CONTEXT_HEADER,
    EVENT_HEADER,
    GatewayHttpRequest,
    recover_context,
    recover_event,
)
from .response import GatewayHttpResponse
from .serializer import serialize

__all__ = [
    "JSONResponseWriter",
    "to_http_response",
    "is_binary",
    "normalize",
    "CONTEXT_HEADER",
    "EVENT_HEADER",
    "GatewayHttpRequest",
    "recover_context",
    "recover_event",
    "GatewayHttpResponse",
    "serialize",
]
