"""Expense data models."""

from pydantic import BaseModel, ConfigDict, Field


class NewExpense(BaseModel):
    """Validated expense fields, before an id has been assigned."""

    model_config = ConfigDict(frozen=True)

    amount: float = Field(..., gt=0, description="Expense amount")
    description: str = Field(..., min_length=1, description="What the money was spent on")
    category: str = Field(..., min_length=1, description="Expense category")
    date: str = Field(..., description="Expense date (YYYY-MM-DD)")


class Expense(BaseModel):
    """Stored expense model."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Store-assigned identifier")
    amount: float
    description: str
    category: str
    date: str
