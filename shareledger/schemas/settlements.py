from decimal import Decimal
from pydantic import BaseModel
from shareledger.core.records import Settlement

class SettlementCreate(BaseModel):
    group_id: int
    payer_id: int
    payee_id: int
    amount: Decimal

class SettlementOut(BaseModel):
    id: int
    group_id: int
    payer_id: int
    payee_id: int
    amount: str

    @classmethod
    def from_settlement(cls, settlement: Settlement):
        return cls(
            id=settlement.id,
            group_id=settlement.group_id,
            payer_id=settlement.payer_id,
            payee_id=settlement.payee_id,
            amount=str(settlement.amount)
        )
