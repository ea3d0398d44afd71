from fastapi import APIRouter, Depends
from shareledger.core.dependencies import get_store
from shareledger.schemas.settlements import SettlementCreate, SettlementOut
from shareledger.services.settlement_service import record_settlement, delete_settlement
from shareledger.services.store import LedgerStore

router = APIRouter()

@router.post("/", response_model=SettlementOut)
async def add_settlement(data: SettlementCreate, store: LedgerStore = Depends(get_store)):
    settlement = await record_settlement(store, data)
    return SettlementOut.from_settlement(settlement)

@router.delete("/{settlement_id}")
async def del_settlement(settlement_id: int, store: LedgerStore = Depends(get_store)):
    await delete_settlement(store, settlement_id)
    return {"status": "deleted"}
