import logging
from shareledger.core.errors import NotFoundError, ValidationError
from shareledger.core.money import Money
from shareledger.core.records import Settlement
from shareledger.schemas.settlements import SettlementCreate
from shareledger.services.balance_services import ensure_group
from shareledger.services.store import LedgerStore

logger = logging.getLogger(__name__)

async def record_settlement(store: LedgerStore, data: SettlementCreate) -> Settlement:
    # payer == payee and non-positive amounts are rejected by Settlement itself
    settlement = Settlement(
        id=None,
        group_id=data.group_id,
        payer_id=data.payer_id,
        payee_id=data.payee_id,
        amount=Money.of(data.amount)
    )

    await ensure_group(store, data.group_id)

    if not await store.is_member(data.group_id, data.payer_id):
        raise ValidationError("Payer is not a member of the group")

    if not await store.is_member(data.group_id, data.payee_id):
        raise ValidationError("Receiver is not in this group")

    saved = await store.add_settlement(settlement)

    logger.info(
        "settlement %s recorded in group %s: %s paid %s to %s",
        saved.id, saved.group_id, saved.payer_id, saved.amount, saved.payee_id
    )
    return saved

async def delete_settlement(store: LedgerStore, settlement_id: int) -> Settlement:
    settlement = await store.delete_settlement(settlement_id)

    if not settlement:
        raise NotFoundError(f"Settlement {settlement_id} not found")

    logger.info("settlement %s deleted from group %s", settlement.id, settlement.group_id)
    return settlement
