"""
Gateway response serializer.

Reads a completed GatewayHttpResponse and produces the API Gateway proxy
integration response shape.
"""

import base64
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..models.aws_v1 import APIGatewayProxyResponse
from .content_type import is_binary, normalize
from .response import GatewayHttpResponse

logger = logging.getLogger("lama.serializer")


def _is_chunked(key: str, value: Any) -> bool:
    # API Gateway does not support chunked transfer.
    return key.lower() == "transfer-encoding" and value == "chunked"


def partition_headers(
    headers: Dict[str, Any],
) -> Tuple[Dict[str, str], Dict[str, List[str]]]:
    """Split headers into single-value and multi-value maps."""
    single: Dict[str, str] = {}
    multi: Dict[str, List[str]] = {}
    for key, value in headers.items():
        if _is_chunked(key, value):
            continue
        if isinstance(value, (list, tuple)):
            multi[key] = [str(v) for v in value]
        else:
            single[key] = str(value)
    return single, multi


def _content_type(headers: Dict[str, str]) -> Optional[str]:
    for key, value in headers.items():
        if key.lower() == "content-type":
            return value
    return None


def _encode_body(payload: Any, binary: bool) -> str:
    if payload is None:
        payload = ""
    if binary:
        raw = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)
        return base64.b64encode(raw).decode("ascii")
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace")
    return str(payload)


def serialize(
    response: GatewayHttpResponse, binary_mime_types: Optional[Iterable[str]] = None
) -> Dict[str, Any]:
    """
    Convert an ended response into an API Gateway response dict.

    Call only after response.wait_ended(); the payload is not final before that.
    binary_mime_types defaults to the BINARY_MIME_TYPES setting.
    """
    if binary_mime_types is None:
        from ..config import config

        binary_mime_types = config.BINARY_MIME_TYPES

    if not response.ended:
        logger.warning("Serializing a response that has not ended")

    headers, multi_value_headers = partition_headers(response.headers or {})

    content_type = normalize(_content_type(headers))
    is_base64_encoded = is_binary(content_type, binary_mime_types)

    status_code = response.status_code if response.status_code is not None else 200

    result = APIGatewayProxyResponse(
        body=_encode_body(response.payload, is_base64_encoded),
        statusCode=status_code,
        isBase64Encoded=is_base64_encoded,
        headers=headers,
        multiValueHeaders=multi_value_headers,
    )
    return result.model_dump()
