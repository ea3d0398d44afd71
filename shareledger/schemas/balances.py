from pydantic import BaseModel
from typing import Dict, List
from shareledger.core.records import Summary, Transfer

class TransferOut(BaseModel):
    from_id: int
    from_name: str | None
    to_id: int
    to_name: str | None
    amount: str

    @classmethod
    def from_transfer(cls, transfer: Transfer, names: Dict[int, str]):
        return cls(
            from_id=transfer.from_user_id,
            from_name=names.get(transfer.from_user_id),
            to_id=transfer.to_user_id,
            to_name=names.get(transfer.to_user_id),
            amount=str(transfer.amount)
        )

class UserBalanceSummaryOut(BaseModel):
    user_id: int
    user_name: str
    total_owed: str
    total_owing: str
    net_balance: str
    is_settled: bool
    debts: List[TransferOut]
    credits: List[TransferOut]

    @classmethod
    def from_summary(cls, summary: Summary, names: Dict[int, str]):
        return cls(
            user_id=summary.user_id,
            user_name=summary.user_name,
            total_owed=str(summary.total_owed),
            total_owing=str(summary.total_owing),
            net_balance=str(summary.net_balance),
            is_settled=summary.is_settled,
            debts=[TransferOut.from_transfer(t, names) for t in summary.debts],
            credits=[TransferOut.from_transfer(t, names) for t in summary.credits]
        )

class PairBalanceOut(BaseModel):
    user_id: int
    other_id: int
    amount: str
