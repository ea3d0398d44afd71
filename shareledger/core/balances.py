from functools import reduce
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Tuple
from shareledger.core.money import Money, ZERO
from shareledger.core.records import Expense, Settlement

# user_id -> signed amount; positive = is owed money, negative = owes money
NetBalance = Mapping[int, Money]

Posting = Tuple[int, Money]


def _postings(expenses: Iterable[Expense], settlements: Iterable[Settlement]) -> Iterator[Posting]:
    for expense in expenses:
        for split in expense.splits:
            # the payer's own share is not a debt
            if split.user_id == expense.payer_id:
                continue
            yield expense.payer_id, split.amount
            yield split.user_id, -split.amount

    for settlement in settlements:
        # payer's debt shrinks, payee is owed less
        yield settlement.payer_id, settlement.amount
        yield settlement.payee_id, -settlement.amount


def _merge(acc: Dict[int, Money], posting: Posting) -> Dict[int, Money]:
    user_id, delta = posting
    acc[user_id] = acc.get(user_id, ZERO) + delta
    return acc


def aggregate(expenses: Iterable[Expense], settlements: Iterable[Settlement]) -> NetBalance:
    """
    Fold every expense split and settlement into a net balance per user.

    The accumulator is private to the call and the result is read-only,
    so concurrent callers never share state.
    """
    net = reduce(_merge, _postings(expenses, settlements), {})
    return MappingProxyType(net)
