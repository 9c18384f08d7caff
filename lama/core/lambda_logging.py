"""
Lambda Logging Utilities

Ensures logs are flushed before the Lambda execution context freezes.
"""

import functools
import logging

from .request_context import clear_request_id, set_request_id


def robust_lambda_logger(func):
    """
    Decorator for Lambda handlers.

    - Binds context.aws_request_id to the log request context
    - Flushes root and package handlers in a finally block (important for Lambda freeze)

    Usage:
        @robust_lambda_logger
        def lambda_handler(event, context):
            return {"statusCode": 200}
    """

    @functools.wraps(func)
    def wrapper(event, context):
        request_id = getattr(context, "aws_request_id", None)
        if request_id is None and isinstance(context, dict):
            request_id = context.get("aws_request_id") or context.get("awsRequestId")
        if request_id:
            set_request_id(request_id)

        try:
            return func(event, context)
        finally:
            for logger in (logging.getLogger(), logging.getLogger("lama")):
                for handler in logger.handlers:
                    handler.flush()
            clear_request_id()

    return wrapper
