from fastapi import APIRouter, Depends
from shareledger.core.dependencies import get_store
from shareledger.schemas.expense import AllocationRequest, ExpenseCreate, ExpenseOut, SplitOut
from shareledger.services.balance_services import allocate_splits
from shareledger.services.expense_services import create_expense, delete_expense
from shareledger.services.store import LedgerStore

router = APIRouter()

@router.post("/", response_model=ExpenseOut)
async def add_expense(data: ExpenseCreate, store: LedgerStore = Depends(get_store)):
    expense = await create_expense(store, data)
    return ExpenseOut.from_expense(expense)

@router.post("/allocate", response_model=list[SplitOut], description="preview the splits of an expense")
async def preview_splits(data: AllocationRequest):
    splits = allocate_splits(data.amount, data.split_type, data.participants())
    return [SplitOut.from_split(s) for s in splits]

@router.delete("/{expense_id}")
async def del_expense(expense_id: int, store: LedgerStore = Depends(get_store)):
    await delete_expense(store, expense_id)
    return {"status": "deleted"}
