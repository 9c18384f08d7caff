"""
Apply a generic {status, body, headers} result onto a server response object.

The target only needs status(code), json(value) and append(name, value).
"""

import json
import logging
from typing import Any, List, Mapping, Protocol, Tuple, Union

from starlette.responses import JSONResponse

from ..models.aws_v1 import HttpResult

logger = logging.getLogger("lama.applier")


class HttpResponseTarget(Protocol):
    def status(self, code: int) -> Any: ...

    def json(self, value: Any) -> Any: ...

    def append(self, name: str, value: Any) -> Any: ...


def to_http_response(
    result: Union[HttpResult, Mapping[str, Any]], http_response: HttpResponseTarget
) -> None:
    """
    Apply status, JSON body and headers from result onto http_response.

    result.body must be a JSON document; a json.JSONDecodeError propagates otherwise.
    """
    if not isinstance(result, HttpResult):
        result = HttpResult.model_validate(result)

    http_response.status(result.status)
    try:
        http_response.json(json.loads(result.body))
    except json.JSONDecodeError:
        logger.error(
            "Result body is not valid JSON",
            extra={"snippet": result.body[:200], "status_code": result.status},
        )
        raise
    for key, value in result.headers.items():
        http_response.append(key, value)


class JSONResponseWriter:
    """
    Collects status/json/append calls and renders a Starlette JSONResponse.

    Lets to_http_response be used from a FastAPI route:

        writer = JSONResponseWriter()
        to_http_response(result, writer)
        return writer.render()
    """

    def __init__(self):
        self.status_code: int = 200
        self.content: Any = None
        self.header_items: List[Tuple[str, str]] = []

    def status(self, code: int) -> "JSONResponseWriter":
        self.status_code = code
        return self

    def json(self, value: Any) -> "JSONResponseWriter":
        self.content = value
        return self

    def append(self, name: str, value: Any) -> "JSONResponseWriter":
        values = value if isinstance(value, list) else [value]
        self.header_items.extend((name, str(v)) for v in values)
        return self

    def render(self) -> JSONResponse:
        response = JSONResponse(content=self.content, status_code=self.status_code)
        for name, value in self.header_items:
            response.headers.append(name, value)
        return response
