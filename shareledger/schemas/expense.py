from decimal import Decimal
from pydantic import BaseModel
from typing import Dict, List
from shareledger.core.records import Expense, Split, SplitPolicy

class SplitSpec(BaseModel):
    """
    Who takes part in an expense, depending on `split_type`:

    - EQUAL: `split_among`, a list of user ids
    - EXACT: `exact_amounts`, user id -> amount
    - PERCENTAGE: `percentages`, user id -> percentage out of 100
    """
    split_type: SplitPolicy
    split_among: List[int] | None = None
    exact_amounts: Dict[int, Decimal] | None = None
    percentages: Dict[int, Decimal] | None = None

    def participants(self):
        if self.split_type == SplitPolicy.EQUAL:
            return self.split_among or []
        if self.split_type == SplitPolicy.EXACT:
            return self.exact_amounts or {}
        return self.percentages or {}

class AllocationRequest(SplitSpec):
    amount: Decimal

class ExpenseCreate(SplitSpec):
    group_id: int
    amount: Decimal
    description: str | None = None
    paid_by: int

class SplitOut(BaseModel):
    user_id: int
    amount: str
    percentage: str | None = None

    @classmethod
    def from_split(cls, split: Split):
        return cls(
            user_id=split.user_id,
            amount=str(split.amount),
            percentage=str(split.percentage) if split.percentage is not None else None
        )

class ExpenseOut(BaseModel):
    id: int
    group_id: int
    amount: str
    description: str | None = None
    paid_by: int
    split_type: SplitPolicy
    splits: List[SplitOut]

    @classmethod
    def from_expense(cls, expense: Expense):
        return cls(
            id=expense.id,
            group_id=expense.group_id,
            amount=str(expense.total_amount),
            description=expense.description,
            paid_by=expense.payer_id,
            split_type=expense.split_policy,
            splits=[SplitOut.from_split(s) for s in expense.splits]
        )
