from decimal import Decimal
from typing import List, Optional, Protocol
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from shareledger.core.money import Money
from shareledger.core.records import Expense, Settlement, Split, SplitPolicy
from shareledger.models.expense import Expense as ExpenseRow
from shareledger.models.expense_split import ExpenseSplit
from shareledger.models.group import Group
from shareledger.models.group_member import GroupMember
from shareledger.models.settlement import Settlement as SettlementRow
from shareledger.models.user import User


class LedgerStore(Protocol):
    """Where the ledger snapshots come from. The core never talks to it directly."""

    async def has_group(self, group_id: int) -> bool: ...

    async def is_member(self, group_id: int, user_id: int) -> bool: ...

    async def list_expenses_with_splits(self, group_id: int) -> List[Expense]: ...

    async def list_settlements(self, group_id: int) -> List[Settlement]: ...

    async def list_groups_for_user(self, user_id: int) -> List[int]: ...

    async def lookup_user_name(self, user_id: int) -> Optional[str]: ...

    async def add_expense(self, expense: Expense) -> Expense: ...

    async def add_settlement(self, settlement: Settlement) -> Settlement: ...

    async def delete_expense(self, expense_id: int) -> Optional[Expense]: ...

    async def delete_settlement(self, settlement_id: int) -> Optional[Settlement]: ...


def _money(value) -> Money:
    return Money.of(Decimal(str(value)))


def _percentage(value) -> Optional[Decimal]:
    if value is None:
        return None
    # Numeric(7, 4) reads back as 33.3300
    pct = Decimal(str(value)).normalize()
    if pct == pct.to_integral_value():
        pct = pct.quantize(Decimal("1"))
    return pct


def _to_expense(row: ExpenseRow) -> Expense:
    return Expense(
        id=row.id,
        group_id=row.group_id,
        description=row.description,
        total_amount=_money(row.amount),
        payer_id=row.paid_by,
        split_policy=SplitPolicy(row.split_type),
        splits=tuple(
            Split(
                user_id=s.user_id,
                amount=_money(s.amount),
                percentage=_percentage(s.percentage),
                expense_id=row.id
            )
            for s in row.splits
        )
    )


def _to_settlement(row: SettlementRow) -> Settlement:
    return Settlement(
        id=row.id,
        group_id=row.group_id,
        payer_id=row.from_user,
        payee_id=row.to_user,
        amount=_money(row.amount)
    )


class SqlLedgerStore:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def has_group(self, group_id: int) -> bool:
        res = await self.db.execute(select(Group.id).where(Group.id == group_id))
        return res.scalar_one_or_none() is not None

    async def is_member(self, group_id: int, user_id: int) -> bool:
        q = select(GroupMember.id).where(
            GroupMember.group_id == group_id,
            GroupMember.user_id == user_id
        )
        res = await self.db.execute(q)
        return res.scalar_one_or_none() is not None

    async def list_expenses_with_splits(self, group_id: int) -> List[Expense]:
        q = (
            select(ExpenseRow)
            .options(selectinload(ExpenseRow.splits))
            .where(ExpenseRow.group_id == group_id, ExpenseRow.is_deleted == False)
            .order_by(ExpenseRow.id)
        )
        res = await self.db.execute(q)
        return [_to_expense(row) for row in res.scalars().all()]

    async def list_settlements(self, group_id: int) -> List[Settlement]:
        q = (
            select(SettlementRow)
            .where(SettlementRow.group_id == group_id)
            .order_by(SettlementRow.id)
        )
        res = await self.db.execute(q)
        return [_to_settlement(row) for row in res.scalars().all()]

    async def list_groups_for_user(self, user_id: int) -> List[int]:
        q = (
            select(GroupMember.group_id)
            .where(GroupMember.user_id == user_id)
            .order_by(GroupMember.group_id)
        )
        res = await self.db.execute(q)
        return list(res.scalars().all())

    async def lookup_user_name(self, user_id: int) -> Optional[str]:
        res = await self.db.execute(select(User.name).where(User.id == user_id))
        return res.scalar_one_or_none()

    async def add_expense(self, expense: Expense) -> Expense:
        row = ExpenseRow(
            group_id=expense.group_id,
            paid_by=expense.payer_id,
            amount=expense.total_amount.to_decimal(),
            description=expense.description,
            split_type=expense.split_policy.value
        )

        self.db.add(row)
        await self.db.flush()  # generates row.id

        self.db.add_all([
            ExpenseSplit(
                expense_id=row.id,
                user_id=s.user_id,
                amount=s.amount.to_decimal(),
                percentage=s.percentage
            )
            for s in expense.splits
        ])

        await self.db.commit()

        return Expense(
            id=row.id,
            group_id=expense.group_id,
            description=expense.description,
            total_amount=expense.total_amount,
            payer_id=expense.payer_id,
            split_policy=expense.split_policy,
            splits=tuple(
                Split(user_id=s.user_id, amount=s.amount, percentage=s.percentage, expense_id=row.id)
                for s in expense.splits
            )
        )

    async def add_settlement(self, settlement: Settlement) -> Settlement:
        row = SettlementRow(
            group_id=settlement.group_id,
            from_user=settlement.payer_id,
            to_user=settlement.payee_id,
            amount=settlement.amount.to_decimal()
        )

        self.db.add(row)
        await self.db.commit()
        await self.db.refresh(row)

        return _to_settlement(row)

    async def delete_expense(self, expense_id: int) -> Optional[Expense]:
        q = (
            select(ExpenseRow)
            .options(selectinload(ExpenseRow.splits))
            .where(ExpenseRow.id == expense_id, ExpenseRow.is_deleted == False)
        )
        res = await self.db.execute(q)
        row = res.scalar_one_or_none()

        if not row:
            return None

        row.is_deleted = True
        await self.db.commit()

        return _to_expense(row)

    async def delete_settlement(self, settlement_id: int) -> Optional[Settlement]:
        res = await self.db.execute(select(SettlementRow).where(SettlementRow.id == settlement_id))
        row = res.scalar_one_or_none()

        if not row:
            return None

        settlement = _to_settlement(row)
        await self.db.delete(row)
        await self.db.commit()

        return settlement
