import logging
from decimal import Decimal
from typing import Dict, Iterable, List, Mapping, Sequence, Union
from shareledger.core.balances import NetBalance, aggregate
from shareledger.core.errors import NotFoundError
from shareledger.core.money import Money, ZERO
from shareledger.core.records import Split, SplitPolicy, Summary, Transfer
from shareledger.core.simplify import simplify
from shareledger.core.splits import allocate
from shareledger.core.summary import UNKNOWN_USER, summarize_for_group, summarize_overall
from shareledger.services.store import LedgerStore

logger = logging.getLogger(__name__)


async def ensure_group(store: LedgerStore, group_id: int):
    if not await store.has_group(group_id):
        raise NotFoundError(f"Group {group_id} does not exist")


async def get_group_net_balances(store: LedgerStore, group_id: int) -> NetBalance:
    await ensure_group(store, group_id)

    expenses = await store.list_expenses_with_splits(group_id)
    settlements = await store.list_settlements(group_id)

    return aggregate(expenses, settlements)


async def compute_group_balances(store: LedgerStore, group_id: int) -> List[Transfer]:
    net = await get_group_net_balances(store, group_id)
    transfers = simplify(net)

    logger.debug("group %s: %d users, %d transfers", group_id, len(net), len(transfers))
    return transfers


async def _user_name(store: LedgerStore, user_id: int) -> str:
    return await store.lookup_user_name(user_id) or UNKNOWN_USER


async def compute_user_summary(store: LedgerStore, user_id: int, group_id: int) -> Summary:
    transfers = await compute_group_balances(store, group_id)
    return summarize_for_group(user_id, await _user_name(store, user_id), transfers)


async def compute_user_overall_summary(store: LedgerStore, user_id: int) -> Summary:
    group_ids = await store.list_groups_for_user(user_id)

    # one independent simplification per group, no cross-group netting
    per_group = [await compute_group_balances(store, gid) for gid in group_ids]

    return summarize_overall(user_id, await _user_name(store, user_id), per_group)


async def get_balance_between_users(store: LedgerStore, group_id: int, user_id: int, other_id: int) -> Money:
    """
    Positive: user_id owes other_id. Negative: other_id owes user_id.
    """
    transfers = await compute_group_balances(store, group_id)

    debt = sum(
        (t.amount for t in transfers if t.from_user_id == user_id and t.to_user_id == other_id),
        ZERO
    )
    credit = sum(
        (t.amount for t in transfers if t.from_user_id == other_id and t.to_user_id == user_id),
        ZERO
    )

    return debt - credit


async def lookup_user_names(store: LedgerStore, user_ids: Iterable[int]) -> Dict[int, str]:
    return {uid: await _user_name(store, uid) for uid in set(user_ids)}


def allocate_splits(
    total: Union[Money, Decimal, str],
    policy: SplitPolicy,
    participant_spec: Union[Sequence[int], Mapping[int, Union[Decimal, str]]]
) -> List[Split]:
    return allocate(Money.of(total), policy, participant_spec)
