"""
In-memory stand-in for a server request object, built from an API Gateway
event and its invocation context.

The event (without its body) and the context travel with the request as
URL-encoded JSON in two reserved headers, so server-style code further down
can recover the original invocation.
"""

import base64
import json
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union
from urllib.parse import quote, unquote, urlencode

from ..models.aws_v1 import APIGatewayProxyEvent, HeaderValue

logger = logging.getLogger("lama.request")

EVENT_HEADER = "x-apigateway-event"
CONTEXT_HEADER = "x-apigateway-context"

# Characters encodeURIComponent leaves alone, besides alphanumerics and "_.-~".
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def serialize_context(context: Any) -> Any:
    """
    JSON-ready form of an invocation context.

    Mappings are kept as is; objects (e.g. the Lambda runtime's LambdaContext)
    become a dict of their public, non-callable attributes.
    """
    if context is None or isinstance(context, (str, int, float, bool, list)):
        return context
    if isinstance(context, Mapping):
        return dict(context)

    data = {}
    for name in dir(context):
        if name.startswith("_"):
            continue
        attr = getattr(context, name)
        if callable(attr):
            continue
        data[name] = attr if isinstance(attr, (str, int, float, bool, type(None))) else str(attr)
    return data


def _format_url(path: Optional[str], query: List[Tuple[str, Any]]) -> str:
    pathname = (path or "").replace("?", "%3F").replace("#", "%23")
    search = urlencode(query, quote_via=quote, safe=_URI_COMPONENT_SAFE)
    return f"{pathname}?{search}" if search else pathname


def _query_items(event: APIGatewayProxyEvent) -> List[Tuple[str, Any]]:
    single = event.queryStringParameters or {}
    multi = event.multiValueQueryStringParameters or {}

    items: List[Tuple[str, Any]] = []
    for key, value in single.items():
        values = multi.get(key)
        if values and len(values) > 1:
            items.extend((key, v) for v in values)
        else:
            items.append((key, value))
    for key, values in multi.items():
        if key not in single:
            items.extend((key, v) for v in values)
    return items


def _header_items(event: APIGatewayProxyEvent) -> Dict[str, HeaderValue]:
    headers: Dict[str, HeaderValue] = dict(event.headers or {})
    for key, values in (event.multiValueHeaders or {}).items():
        if len(values) > 1:
            headers[key] = list(values)
        elif values and key not in headers:
            headers[key] = values[0]
    return headers


def _has_header(headers: Mapping[str, Any], name: str) -> bool:
    name = name.lower()
    return any(key.lower() == name for key in headers)


class GatewayHttpRequest:
    """
    Synthetic request built from an event/context pair.

    headers has lower-cased keys; raw_headers keeps the original names as a
    flat [name, value, name, value, ...] list. params and query are left empty
    for a downstream router.
    """

    def __init__(self, event: Union[Mapping[str, Any], APIGatewayProxyEvent], context: Any):
        if isinstance(event, APIGatewayProxyEvent):
            raw_event = event.model_dump(exclude_unset=True)
        else:
            raw_event = dict(event)
            event = APIGatewayProxyEvent.model_validate(raw_event)

        # The body is never embedded in the event header.
        event_without_body = {k: v for k, v in raw_event.items() if k != "body"}

        headers = _header_items(event)
        headers[EVENT_HEADER] = encode_uri_component(_to_json(event_without_body))
        headers[CONTEXT_HEADER] = encode_uri_component(_to_json(serialize_context(context)))

        self.body = b""
        if event.body:
            if event.isBase64Encoded:
                self.body = base64.b64decode(event.body)
            else:
                self.body = event.body.encode("utf-8")
            # API Gateway does not set Content-Length on requests even when they have a body.
            if not _has_header(headers, "content-length"):
                headers["Content-Length"] = str(len(self.body))

        self.params: Dict[str, str] = {}
        self.query: Dict[str, str] = {}
        self.method = event.httpMethod

        url = _format_url(event.path, _query_items(event))
        self.path = url
        self.url = url

        self.raw_headers: List[str] = []
        for key, value in headers.items():
            for item in value if isinstance(value, list) else [value]:
                self.raw_headers.extend((key, item))

        self.headers: Dict[str, HeaderValue] = {
            key.lower(): value for key, value in headers.items()
        }

        logger.debug(
            "Built request from event",
            extra={"method": self.method, "path": self.path, "body_length": len(self.body)},
        )

    def get_header(self, name: str) -> Optional[HeaderValue]:
        return self.headers.get(name.lower())


def _recover(headers: Mapping[str, Any], name: str) -> Any:
    lowered = {key.lower(): value for key, value in headers.items()}
    value = lowered.get(name)
    if value is None:
        return None
    return json.loads(unquote(value))


def recover_event(headers: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Decode the original event (without body) from request headers."""
    return _recover(headers, EVENT_HEADER)


def recover_context(headers: Mapping[str, Any]) -> Any:
    """Decode the original invocation context from request headers."""
    return _recover(headers, CONTEXT_HEADER)
