import logging
from shareledger.core.errors import NotFoundError, ValidationError
from shareledger.core.money import Money
from shareledger.core.records import Expense
from shareledger.schemas.expense import ExpenseCreate
from shareledger.services.balance_services import allocate_splits, ensure_group
from shareledger.services.store import LedgerStore

logger = logging.getLogger(__name__)

async def create_expense(store: LedgerStore, data: ExpenseCreate) -> Expense:
    await ensure_group(store, data.group_id)

    if not await store.is_member(data.group_id, data.paid_by):
        raise ValidationError("Payer is not a member of the group")

    splits = allocate_splits(data.amount, data.split_type, data.participants())

    for s in splits:
        if not await store.is_member(data.group_id, s.user_id):
            raise ValidationError(f"User {s.user_id} in splits is not a member of the group")

    expense = await store.add_expense(Expense(
        id=None,
        group_id=data.group_id,
        description=data.description,
        total_amount=Money.of(data.amount),
        payer_id=data.paid_by,
        split_policy=data.split_type,
        splits=tuple(splits)
    ))

    logger.info(
        "expense %s recorded in group %s: %s paid by %s, %s split among %d",
        expense.id, expense.group_id, expense.total_amount, expense.payer_id,
        expense.split_policy.value, len(expense.splits)
    )
    return expense

async def delete_expense(store: LedgerStore, expense_id: int) -> Expense:
    # soft delete, the expense drops out of every later balance
    expense = await store.delete_expense(expense_id)

    if not expense:
        raise NotFoundError(f"Expense {expense_id} not found")

    logger.info("expense %s deleted from group %s", expense.id, expense.group_id)
    return expense
