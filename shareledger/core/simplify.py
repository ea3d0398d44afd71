from typing import List, Tuple
from shareledger.core.balances import NetBalance
from shareledger.core.money import Money, ONE_CENT, ZERO
from shareledger.core.records import Transfer


def _ranked(entries: List[Tuple[int, Money]]) -> List[List]:
    # largest amount first, ties by user id so the output is reproducible
    entries.sort(key=lambda e: (-e[1].cents, e[0]))
    return [[uid, amt] for uid, amt in entries]


def simplify(net_map: NetBalance) -> List[Transfer]:
    """
    Greedy matching of the largest debtor with the largest creditor.

    Runs in O(n log n) and is deterministic. It does not always find the
    fewest possible transfers when debts form cycles.
    """
    creditors = _ranked([(uid, bal) for uid, bal in net_map.items() if bal > ZERO])
    debtors = _ranked([(uid, -bal) for uid, bal in net_map.items() if bal < ZERO])

    transfers: List[Transfer] = []
    i = 0
    j = 0

    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]

        settle = min(debtor[1], creditor[1])

        if settle >= ONE_CENT:
            transfers.append(Transfer(
                from_user_id=debtor[0],
                to_user_id=creditor[0],
                amount=settle
            ))

        debtor[1] -= settle
        creditor[1] -= settle

        if debtor[1] < ONE_CENT:
            i += 1
        if creditor[1] < ONE_CENT:
            j += 1

    return transfers
