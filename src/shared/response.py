"""Response utilities for Lambda functions."""

import json
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ModelEncoder(json.JSONEncoder):
    """JSON encoder for pydantic models."""

    def default(self, obj):
        if isinstance(obj, BaseModel):
            return obj.model_dump()
        return super().default(obj)


def default_headers() -> Dict[str, str]:
    """Headers attached to every response."""
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": os.environ.get('CORS_ALLOW_ORIGIN', '*'),
        "Access-Control-Allow-Headers": "Content-Type,X-Amz-Date,Authorization,X-Api-Key,X-Amz-Security-Token",
        "Access-Control-Allow-Methods": "GET,POST"
    }


def json_response(
    data: Any,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Create a Lambda proxy response with a JSON body.

    Args:
        data: Response body, serialized as-is
        status_code: HTTP status code (default: 200)
        headers: Optional additional headers

    Returns:
        Lambda proxy response dictionary
    """
    response_headers = default_headers()

    if headers:
        response_headers.update(headers)

    return {
        "statusCode": status_code,
        "headers": response_headers,
        "body": json.dumps(data, cls=ModelEncoder)
    }


def created_response(data: Any) -> Dict[str, Any]:
    """Create a 201 response for a newly created resource."""
    return json_response(data, status_code=201)


def error_response(
    message: str,
    status_code: int = 500,
    headers: Optional[Dict[str, str]] = None
) -> Dict[str, Any]:
    """
    Create an error response.

    Args:
        message: Error message
        status_code: HTTP status code (default: 500)
        headers: Optional additional headers

    Returns:
        Lambda proxy response dictionary
    """
    return json_response({"error": message}, status_code=status_code, headers=headers)


def internal_error_response() -> Dict[str, Any]:
    """Create an opaque internal server error response."""
    return error_response("Internal Server Error", status_code=500)
