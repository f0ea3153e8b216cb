"""Lambda handler for expense operations."""

import base64
import json
import os
import logging
from typing import Dict, Any
import sys

# Add parent directory to path for imports
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from shared.response import (
    json_response,
    created_response,
    error_response,
    internal_error_response
)
from shared.exceptions import ExpenseTrackerException, ValidationError, MethodNotAllowedError
from expenses.store import ExpenseStore
from expenses.validation import validate_expense

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO'))

ALLOWED_METHODS = ['GET', 'POST']

# One store per container; it is discarded when the container is recycled.
expense_store = ExpenseStore()


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for expense operations.

    Handles:
    - GET /expenses - List expenses
    - POST /expenses - Create expense

    Args:
        event: Lambda event
        context: Lambda context

    Returns:
        API Gateway response
    """
    return handle_request(event, expense_store)


def handle_request(event: Dict[str, Any], store: ExpenseStore) -> Dict[str, Any]:
    """
    Route a request against the given store.

    Args:
        event: Lambda event
        store: Store to read from and append to

    Returns:
        API Gateway response
    """
    try:
        http_method = get_http_method(event)

        # Log request
        logger.info(f"Request: {http_method} {get_path(event)}")

        if http_method == 'GET':
            return handle_list(store)
        elif http_method == 'POST':
            return handle_create(event, store)
        else:
            raise MethodNotAllowedError(http_method, ALLOWED_METHODS)

    except ExpenseTrackerException as e:
        logger.warning(f"Application error: {e.message}")
        return error_response(e.message, status_code=e.status_code, headers=e.headers)
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        return internal_error_response()


def handle_list(store: ExpenseStore) -> Dict[str, Any]:
    """Handle list expenses."""
    return json_response(store.list_all())


def handle_create(event: Dict[str, Any], store: ExpenseStore) -> Dict[str, Any]:
    """
    Handle create expense.

    The payload is fully validated before the store is touched, so a failed
    request never leaves a partial record behind.

    Args:
        event: Lambda event
        store: Store to append to

    Returns:
        API Gateway response
    """
    payload = parse_body(event)
    new_expense = validate_expense(payload)
    expense = store.append(new_expense)

    logger.info(f"Expense created successfully: {expense.id}")

    return created_response(expense)


def parse_body(event: Dict[str, Any]) -> Any:
    """
    Extract the JSON payload from the event body.

    Args:
        event: Lambda event

    Returns:
        The decoded payload, or an empty dict when there is no body

    Raises:
        ValidationError: If the body is not valid JSON
    """
    body = event.get('body')

    if not body:
        return {}

    # Test events and direct invocations may carry an already-decoded body
    if not isinstance(body, (str, bytes)):
        return body

    try:
        if event.get('isBase64Encoded'):
            body = base64.b64decode(body)
        payload = json.loads(body)
    except ValueError:
        raise ValidationError("Request body must be valid JSON")

    return payload if payload is not None else {}


def get_http_method(event: Dict[str, Any]) -> str:
    """
    Extract the HTTP method from a REST (v1) or HTTP API (v2) event.

    Args:
        event: Lambda event

    Returns:
        Upper-cased HTTP method, or an empty string if absent
    """
    method = event.get('httpMethod')
    if not method:
        http_context = (event.get('requestContext') or {}).get('http') or {}
        method = http_context.get('method')
    return (method or '').upper()


def get_path(event: Dict[str, Any]) -> str:
    """Extract the request path from a REST (v1) or HTTP API (v2) event."""
    return event.get('path') or event.get('rawPath') or ''
