from fastapi import APIRouter, Depends
from shareledger.core.dependencies import get_store
from shareledger.schemas.balances import PairBalanceOut, TransferOut, UserBalanceSummaryOut
from shareledger.services.balance_services import (
    compute_group_balances,
    compute_user_summary,
    compute_user_overall_summary,
    get_balance_between_users,
    lookup_user_names,
)
from shareledger.services.store import LedgerStore

router = APIRouter()

@router.get("/groups/{group_id}/balances", response_model=list[TransferOut], description="simplified debts of the group")
async def group_balances(group_id: int, store: LedgerStore = Depends(get_store)):
    transfers = await compute_group_balances(store, group_id)
    names = await lookup_user_names(store, [u for t in transfers for u in (t.from_user_id, t.to_user_id)])
    return [TransferOut.from_transfer(t, names) for t in transfers]


@router.get("/groups/{group_id}/balances/user/{user_id}", response_model=UserBalanceSummaryOut)
async def user_group_balance(group_id: int, user_id: int, store: LedgerStore = Depends(get_store)):
    summary = await compute_user_summary(store, user_id, group_id)
    return await _summary_out(store, summary)


@router.get("/groups/{group_id}/balances/between/{user_id}/{other_id}", response_model=PairBalanceOut)
async def pair_balance(group_id: int, user_id: int, other_id: int, store: LedgerStore = Depends(get_store)):
    amount = await get_balance_between_users(store, group_id, user_id, other_id)
    return PairBalanceOut(user_id=user_id, other_id=other_id, amount=str(amount))


@router.get("/users/{user_id}/balance", response_model=UserBalanceSummaryOut, description="balance across all groups of the user")
async def user_overall_balance(user_id: int, store: LedgerStore = Depends(get_store)):
    summary = await compute_user_overall_summary(store, user_id)
    return await _summary_out(store, summary)


async def _summary_out(store: LedgerStore, summary):
    transfers = summary.debts + summary.credits
    names = await lookup_user_names(store, [u for t in transfers for u in (t.from_user_id, t.to_user_id)])
    return UserBalanceSummaryOut.from_summary(summary, names)
