import logging

import pytest

from lama.core.request_context import clear_request_id


@pytest.fixture(autouse=True)
def _clear_request_id():
    clear_request_id()
    yield
    clear_request_id()


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    lama_logger = logging.getLogger("lama")
    root_handlers, root_level = list(root.handlers), root.level
    handlers, level, propagate = list(lama_logger.handlers), lama_logger.level, lama_logger.propagate
    yield
    root.handlers = root_handlers
    root.setLevel(root_level)
    lama_logger.handlers = handlers
    lama_logger.setLevel(level)
    lama_logger.propagate = propagate


@pytest.fixture
def api_event():
    return {
        "resource": "/items/{id}",
        "path": "/items/42",
        "httpMethod": "POST",
        "headers": {"Content-Type": "application/json", "X-Trace": "abc"},
        "queryStringParameters": {"verbose": "1"},
        "requestContext": {"requestId": "req-123", "stage": "prod"},
        "body": '{"name": "widget"}',
        "isBase64Encoded": False,
    }
