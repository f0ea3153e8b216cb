"""Validation of incoming expense payloads."""

from typing import Any, Mapping

from shared.validators import (
    validate_required_fields,
    validate_amount,
    validate_date,
    validate_text
)
from expenses.models import NewExpense

REQUIRED_FIELDS = ['amount', 'description', 'category', 'date']


def validate_expense(payload: Any) -> NewExpense:
    """
    Turn an untyped request payload into a NewExpense.

    Checks run in a fixed order and stop at the first failure, so the error
    message for a given payload is deterministic: required fields (amount,
    description, category, date), then the amount, then the date format,
    then the text fields.

    Args:
        payload: Parsed request body; anything that is not a mapping is
            treated as an empty one

    Returns:
        The normalized expense

    Raises:
        ValidationError: With the reason of the first failed check
    """
    if not isinstance(payload, Mapping):
        payload = {}

    validate_required_fields(payload, REQUIRED_FIELDS)

    amount = validate_amount(payload['amount'])
    date = validate_date(payload['date'])
    description = validate_text(payload['description'], 'description')
    category = validate_text(payload['category'], 'category')

    return NewExpense(
        amount=amount,
        description=description,
        category=category,
        date=date
    )
