from typing import Iterable, List, Sequence
from shareledger.core.money import ZERO
from shareledger.core.records import Summary, Transfer

UNKNOWN_USER = "Unknown"


def _build(user_id: int, user_name: str, debts: List[Transfer], credits: List[Transfer]) -> Summary:
    total_owed = sum((t.amount for t in debts), ZERO)
    total_owing = sum((t.amount for t in credits), ZERO)

    return Summary(
        user_id=user_id,
        user_name=user_name or UNKNOWN_USER,
        total_owed=total_owed,
        total_owing=total_owing,
        net_balance=total_owing - total_owed,
        debts=tuple(debts),
        credits=tuple(credits),
    )


def summarize_for_group(user_id: int, user_name: str, transfers: Sequence[Transfer]) -> Summary:
    debts = [t for t in transfers if t.from_user_id == user_id]
    credits = [t for t in transfers if t.to_user_id == user_id]
    return _build(user_id, user_name, debts, credits)


def summarize_overall(user_id: int, user_name: str, transfers_per_group: Iterable[Sequence[Transfer]]) -> Summary:
    """
    Concatenate the per-group debts and credits of a user.

    Each group's transfers come from its own simplification; groups are never
    merged into a single ledger, so nothing is netted across groups.
    """
    debts: List[Transfer] = []
    credits: List[Transfer] = []

    for transfers in transfers_per_group:
        debts.extend(t for t in transfers if t.from_user_id == user_id)
        credits.extend(t for t in transfers if t.to_user_id == user_id)

    return _build(user_id, user_name, debts, credits)
