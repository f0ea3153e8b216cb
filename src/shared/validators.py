"""Validation utilities for the expense tracker application."""

import math
import re
from typing import Any, List, Mapping
from decimal import Decimal

from .exceptions import ValidationError


# Lexical YYYY-MM-DD check only; the calendar is not consulted.
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')

# ASCII decimal with optional sign and exponent; no underscores or other digits.
AMOUNT_PATTERN = re.compile(r'[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?')

AMOUNT_ERROR = "Amount must be a positive number"
DATE_ERROR = "Date must be in YYYY-MM-DD format"


def validate_required_fields(data: Mapping[str, Any], required_fields: List[str]) -> None:
    """
    Validate that required fields are present in data.

    Fields are checked in the given order and the first missing one is
    reported. ``amount`` only has to be non-null, so that a zero amount is
    reported by the amount check rather than as missing; every other field
    must be truthy.

    Args:
        data: Data mapping to validate
        required_fields: Ordered list of required field names

    Raises:
        ValidationError: Naming the first missing field
    """
    for field in required_fields:
        value = data.get(field)
        missing = value is None if field == 'amount' else not value
        if missing:
            raise ValidationError(f"Missing required field: {field}")


def validate_amount(amount: Any) -> float:
    """
    Coerce a monetary amount to a float.

    Strings and plain numbers are accepted. Strings must be plain ASCII
    decimals, optionally with an exponent. Booleans, containers and anything
    that does not parse are rejected, as are NaN, infinities, integers too
    large for a float and values that are not strictly positive.

    Args:
        amount: Amount to validate

    Returns:
        Validated amount as float

    Raises:
        ValidationError: If amount is not a positive number
    """
    if isinstance(amount, bool) or not isinstance(amount, (str, int, float, Decimal)):
        raise ValidationError(AMOUNT_ERROR)

    if isinstance(amount, str):
        amount = amount.strip()
        if not AMOUNT_PATTERN.fullmatch(amount):
            raise ValidationError(AMOUNT_ERROR)

    try:
        numeric_amount = float(amount)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(AMOUNT_ERROR)

    if math.isnan(numeric_amount) or math.isinf(numeric_amount) or numeric_amount <= 0:
        raise ValidationError(AMOUNT_ERROR)

    return numeric_amount


def validate_date(date_str: Any) -> str:
    """
    Validate date format (YYYY-MM-DD).

    Args:
        date_str: Date string to validate

    Returns:
        Validated date string

    Raises:
        ValidationError: If date does not match the pattern
    """
    if not isinstance(date_str, str) or not DATE_PATTERN.fullmatch(date_str):
        raise ValidationError(DATE_ERROR)

    return date_str


def validate_text(value: Any, field_name: str) -> str:
    """Validate that a field holds a string."""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name.capitalize()} must be text")

    return value
