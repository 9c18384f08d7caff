# lama/models/aws_v1.py

"""
Pydantic models for AWS API Gateway v1 (REST API) proxy integration payloads.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html

The inbound event is modelled loosely: every field is optional and unknown
keys (resource, requestContext, stageVariables, ...) are kept as extras so the
event can be forwarded verbatim.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# A header that was set once is a str; a repeated header is the ordered list of its values.
HeaderValue = Union[str, List[str]]


class APIGatewayProxyEvent(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) inbound event.
    """

    httpMethod: Optional[str] = None
    path: Optional[str] = None
    headers: Optional[Dict[str, Any]] = None
    multiValueHeaders: Optional[Dict[str, List[Any]]] = None
    queryStringParameters: Optional[Dict[str, Any]] = None
    multiValueQueryStringParameters: Optional[Dict[str, List[Any]]] = None
    body: Optional[str] = None
    isBase64Encoded: Optional[bool] = None

    model_config = ConfigDict(extra="allow")


class APIGatewayProxyResponse(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) response.

    A header key is present in either headers or multiValueHeaders, never both.
    """

    statusCode: int = 200
    body: str = ""
    isBase64Encoded: bool = False
    headers: Dict[str, str] = Field(default_factory=dict)
    multiValueHeaders: Dict[str, List[str]] = Field(default_factory=dict)


class HttpResult(BaseModel):
    """Generic result applied onto a server response object."""

    status: int
    body: str
    # Values go to the target response unchanged, whatever their type.
    headers: Dict[str, Any] = Field(default_factory=dict)
