"""In-memory expense store.

Records live only as long as the process that holds the store. A recycled
Lambda container starts again from the seed data.
"""

import logging
import threading
from typing import Iterable, List, Optional

from expenses.models import Expense, NewExpense

logger = logging.getLogger(__name__)


DEFAULT_SEED = (
    Expense(id=1, amount=50.00, description="Groceries", category="Food", date="2023-10-26"),
    Expense(id=2, amount=15.50, description="Movie ticket", category="Entertainment", date="2023-10-25"),
)


class ExpenseStore:
    """Ordered, append-only collection of expenses with id assignment."""

    def __init__(self, seed: Optional[Iterable[Expense]] = None):
        """
        Initialize the store.

        Args:
            seed: Initial records, in order. Defaults to DEFAULT_SEED.
        """
        self._expenses: List[Expense] = list(DEFAULT_SEED if seed is None else seed)
        self._next_id = max((expense.id for expense in self._expenses), default=0) + 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._expenses)

    def list_all(self) -> List[Expense]:
        """
        List all expenses in insertion order.

        Returns:
            A new list; mutating it does not affect the store
        """
        with self._lock:
            return list(self._expenses)

    def append(self, new_expense: NewExpense) -> Expense:
        """
        Store a validated expense under the next unused id.

        Args:
            new_expense: Validated expense fields

        Returns:
            The created expense
        """
        with self._lock:
            expense = Expense(id=self._next_id, **new_expense.model_dump())
            self._expenses.append(expense)
            self._next_id += 1

        logger.debug(f"Stored expense {expense.id}")
        return expense
