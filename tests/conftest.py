import itertools
from typing import Dict, List, Optional, Set
import pytest
from fastapi.testclient import TestClient
from shareledger.core.dependencies import get_store
from shareledger.core.records import Expense, Settlement, Split
from shareledger.main import app


class InMemoryStore:
    """LedgerStore backed by plain lists, for tests."""

    def __init__(self):
        self.users: Dict[int, str] = {}
        self.members: Dict[int, Set[int]] = {}
        self.expenses: List[Expense] = []
        self.settlements: List[Settlement] = []
        self.deleted_expense_ids: Set[int] = set()
        self._ids = itertools.count(1)

    def add_group(self, group_id: int, user_ids):
        self.members[group_id] = set(user_ids)

    async def has_group(self, group_id: int) -> bool:
        return group_id in self.members

    async def is_member(self, group_id: int, user_id: int) -> bool:
        return user_id in self.members.get(group_id, set())

    async def list_expenses_with_splits(self, group_id: int) -> List[Expense]:
        return [e for e in self.expenses if e.group_id == group_id and e.id not in self.deleted_expense_ids]

    async def list_settlements(self, group_id: int) -> List[Settlement]:
        return [s for s in self.settlements if s.group_id == group_id]

    async def list_groups_for_user(self, user_id: int) -> List[int]:
        return sorted(gid for gid, users in self.members.items() if user_id in users)

    async def lookup_user_name(self, user_id: int) -> Optional[str]:
        return self.users.get(user_id)

    async def add_expense(self, expense: Expense) -> Expense:
        expense_id = next(self._ids)
        saved = Expense(
            id=expense_id,
            group_id=expense.group_id,
            description=expense.description,
            total_amount=expense.total_amount,
            payer_id=expense.payer_id,
            split_policy=expense.split_policy,
            splits=tuple(
                Split(user_id=s.user_id, amount=s.amount, percentage=s.percentage, expense_id=expense_id)
                for s in expense.splits
            ),
        )
        self.expenses.append(saved)
        return saved

    async def add_settlement(self, settlement: Settlement) -> Settlement:
        saved = Settlement(
            id=next(self._ids),
            group_id=settlement.group_id,
            payer_id=settlement.payer_id,
            payee_id=settlement.payee_id,
            amount=settlement.amount,
        )
        self.settlements.append(saved)
        return saved

    async def delete_expense(self, expense_id: int) -> Optional[Expense]:
        for e in self.expenses:
            if e.id == expense_id and e.id not in self.deleted_expense_ids:
                self.deleted_expense_ids.add(expense_id)
                return e
        return None

    async def delete_settlement(self, settlement_id: int) -> Optional[Settlement]:
        for s in self.settlements:
            if s.id == settlement_id:
                self.settlements.remove(s)
                return s
        return None


@pytest.fixture
def store():
    s = InMemoryStore()
    s.users.update({1: "Asha", 2: "Bilal", 3: "Chen", 4: "Dana"})
    s.add_group(10, [1, 2, 3])
    s.add_group(20, [1, 4])
    return s


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
