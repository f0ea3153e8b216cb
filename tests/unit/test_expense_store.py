"""Unit tests for the in-memory expense store."""

import pydantic
import pytest
from concurrent.futures import ThreadPoolExecutor
import sys
import os

# Add src directory to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from expenses.store import ExpenseStore, DEFAULT_SEED
from expenses.models import Expense, NewExpense


class TestExpenseStore:
    """Test cases for ExpenseStore."""

    @pytest.fixture
    def store(self):
        """Create a store holding the default seed."""
        return ExpenseStore()

    @pytest.fixture
    def coffee(self):
        """A validated expense ready to append."""
        return NewExpense(amount=12.5, description='Coffee', category='Food', date='2023-11-01')

    def test_fresh_store_lists_seed(self, store):
        """Test that a fresh store returns the two seeded records in order."""
        expenses = store.list_all()

        assert [expense.model_dump() for expense in expenses] == [
            {'id': 1, 'amount': 50.0, 'description': 'Groceries', 'category': 'Food', 'date': '2023-10-26'},
            {'id': 2, 'amount': 15.5, 'description': 'Movie ticket', 'category': 'Entertainment',
             'date': '2023-10-25'}
        ]

    def test_append_assigns_next_id(self, store, coffee):
        """Test that the first append after seeding gets id 3."""
        expense = store.append(coffee)

        assert expense == Expense(id=3, amount=12.5, description='Coffee', category='Food', date='2023-11-01')

    def test_append_goes_to_the_end(self, store, coffee):
        """Test that appended records show up last, unchanged."""
        before = store.list_all()

        expense = store.append(coffee)
        after = store.list_all()

        assert len(after) == len(before) + 1
        assert after[:-1] == before
        assert after[-1] == expense

    def test_ids_strictly_increase(self, store, coffee):
        """Test that every new id is greater than all earlier ones."""
        seen = [expense.id for expense in store.list_all()]

        for _ in range(5):
            expense = store.append(coffee)
            assert expense.id > max(seen)
            seen.append(expense.id)

        assert seen == [1, 2, 3, 4, 5, 6, 7]

    def test_list_all_is_repeatable(self, store, coffee):
        """Test that listing twice without appending gives the same result."""
        store.append(coffee)

        assert store.list_all() == store.list_all()

    def test_list_all_returns_a_copy(self, store):
        """Test that mutating the returned list leaves the store alone."""
        expenses = store.list_all()
        expenses.clear()

        assert len(store) == 2

    def test_records_are_immutable(self, store):
        """Test that stored records cannot be modified."""
        expense = store.list_all()[0]

        with pytest.raises(pydantic.ValidationError):
            expense.amount = 1.0

        assert store.list_all()[0].amount == 50.0

    def test_empty_seed_starts_at_one(self, coffee):
        """Test that an empty store assigns id 1 first."""
        store = ExpenseStore(seed=[])

        assert store.list_all() == []
        assert store.append(coffee).id == 1

    def test_counter_follows_highest_seed_id(self, coffee):
        """Test that the counter starts past the highest seeded id."""
        seed = [Expense(id=10, amount=1.0, description='A', category='B', date='2023-01-01'),
                Expense(id=4, amount=2.0, description='C', category='D', date='2023-01-02')]
        store = ExpenseStore(seed=seed)

        assert store.append(coffee).id == 11

    def test_stores_are_independent(self, coffee):
        """Test that two stores do not share records or counters."""
        first = ExpenseStore()
        second = ExpenseStore()

        first.append(coffee)

        assert len(first) == 3
        assert len(second) == 2
        assert second.append(coffee).id == 3

    def test_default_seed_is_not_shared_state(self, coffee):
        """Test that appending does not alter the default seed."""
        ExpenseStore().append(coffee)

        assert len(DEFAULT_SEED) == 2

    def test_concurrent_appends_get_unique_ids(self, store, coffee):
        """Test that parallel appends neither lose records nor reuse ids."""
        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(lambda _: store.append(coffee), range(200)))

        ids = [expense.id for expense in created]
        listed_ids = [expense.id for expense in store.list_all()]

        assert sorted(ids) == list(range(3, 203))
        assert listed_ids == sorted(listed_ids)
        assert len(store) == 202


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
