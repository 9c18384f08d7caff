"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import APIGatewayProxyEvent, APIGatewayProxyResponse, HeaderValue, HttpResult

__all__ = [
    "APIGatewayProxyEvent",
    "APIGatewayProxyResponse",
    "HeaderValue",
    "HttpResult",
]
