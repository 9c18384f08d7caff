"""
Run server-style handler code for API Gateway invocations.

The handler is called as handler(request, response) and must eventually call
response.end(payload). It may be a plain function or a coroutine function, and
may end the response from a task it schedules.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Iterable, Optional, Union

from .converters import to_api_gateway_response, to_request_response
from .core.lambda_logging import robust_lambda_logger
from .core.logging_config import setup_logging
from .core.request import GatewayHttpRequest
from .core.response import GatewayHttpResponse

logger = logging.getLogger("lama.handler")

ServerHandler = Callable[
    [GatewayHttpRequest, GatewayHttpResponse], Union[None, Awaitable[None]]
]


async def invoke(
    handler: ServerHandler,
    event: Dict[str, Any],
    context: Any,
    binary_mime_types: Optional[Iterable[str]] = None,
) -> Dict[str, Any]:
    """
    Serve one invocation with a server-style handler and return the gateway response.

    There is no timeout: if the handler never ends the response this waits forever.
    """
    request, response = await to_request_response(event, context)

    try:
        result = handler(request, response)
        if inspect.isawaitable(result):
            await result
    except Exception as e:
        logger.error(
            f"Handler raised: {e}",
            exc_info=True,
            extra={"method": request.method, "path": request.path},
        )
        raise

    await response.wait_ended()

    gateway_response = to_api_gateway_response(request, response, binary_mime_types)
    logger.info(
        "Invocation completed",
        extra={
            "method": request.method,
            "path": request.path,
            "status_code": gateway_response["statusCode"],
        },
    )
    return gateway_response


def create_lambda_handler(
    handler: ServerHandler, binary_mime_types: Optional[Iterable[str]] = None
) -> Callable[[Dict[str, Any], Any], Dict[str, Any]]:
    """
    Wrap a server-style handler as a synchronous Lambda entry point.

    Logging is configured from LOG_CONFIG_PATH when the handler is created.

    Usage:
        lambda_handler = create_lambda_handler(app)
    """
    setup_logging()

    @robust_lambda_logger
    def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
        return asyncio.run(invoke(handler, event, context, binary_mime_types))

    return lambda_handler
