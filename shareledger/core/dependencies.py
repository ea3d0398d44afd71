from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from shareledger.db.session import get_db
from shareledger.services.store import SqlLedgerStore

async def get_store(db: AsyncSession = Depends(get_db)):
    return SqlLedgerStore(db)
