import pytest

from lama import to_api_gateway_response, to_event_context, to_request_response
from lama.core.request import GatewayHttpRequest
from lama.core.response import GatewayHttpResponse
from lama.exceptions import EventContextNotImplementedError, LamaError


def test_to_event_context_is_not_implemented():
    with pytest.raises(NotImplementedError):
        to_event_context(object(), object())

    with pytest.raises(EventContextNotImplementedError) as exc_info:
        to_event_context(None, None)
    assert isinstance(exc_info.value, LamaError)


@pytest.mark.asyncio
async def test_to_request_response_builds_pair(api_event):
    req, res = await to_request_response(api_event, {"functionName": "fn"})

    assert isinstance(req, GatewayHttpRequest)
    assert isinstance(res, GatewayHttpResponse)
    assert req.path == "/items/42?verbose=1"
    assert req.method == "POST"
    assert res.ended is False


@pytest.mark.asyncio
async def test_round_trip_through_server_style_code(api_event):
    req, res = await to_request_response(api_event, {})

    res.status_code = 201
    res.set_header("content-type", "application/json")
    res.set_header("set-cookie", "a=1")
    res.set_header("set-cookie", "b=2")
    res.set_header("transfer-encoding", "chunked")
    res.end(req.body)
    await res.wait_ended()

    result = to_api_gateway_response(req, res)

    assert result == {
        "body": '{"name": "widget"}',
        "statusCode": 201,
        "isBase64Encoded": False,
        "headers": {"content-type": "application/json"},
        "multiValueHeaders": {"set-cookie": ["a=1", "b=2"]},
    }


@pytest.mark.asyncio
async def test_to_api_gateway_response_with_binary_types():
    req, res = await to_request_response({"httpMethod": "GET", "path": "/logo"}, {})
    res.set_header("content-type", "image/gif")
    res.end(b"GIF89a")

    result = to_api_gateway_response(req, res, binary_mime_types=["image/*"])

    assert result["isBase64Encoded"] is True
    assert result["body"] == "R0lGODlh"
