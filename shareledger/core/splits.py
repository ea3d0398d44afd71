"""
Split allocation.

Every policy hands the rounding residue to the last participant in a fixed order,
so the splits always add up to the expense total to the cent:

- EQUAL: list order, last entry absorbs the remainder
- EXACT: amounts taken verbatim, must already add up
- PERCENTAGE: ascending user id, last user absorbs the remainder
"""
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Mapping, Sequence, Union
from shareledger.core.errors import ValidationError
from shareledger.core.money import Money, ZERO, round_half_up_to_cents
from shareledger.core.records import Split, SplitPolicy

HUNDRED = Decimal("100")
PERCENT_SCALE = Decimal("0.0001")

ParticipantSpec = Union[Sequence[int], Mapping[int, Union[Money, Decimal, str, int]]]


def allocate(total: Money, policy: SplitPolicy, participants: ParticipantSpec) -> List[Split]:
    if total <= ZERO:
        raise ValidationError(f"Expense amount must be positive, got {total}")

    try:
        policy = SplitPolicy(policy)
    except ValueError:
        raise ValidationError(f"Unknown split type: {policy}")

    if policy is SplitPolicy.EQUAL:
        return _equal_splits(total, participants)
    if policy is SplitPolicy.EXACT:
        return _exact_splits(total, participants)
    return _percentage_splits(total, participants)


def _equal_splits(total: Money, user_ids: Sequence[int]) -> List[Split]:
    if isinstance(user_ids, Mapping):
        raise ValidationError("EQUAL split takes a list of users")

    user_ids = list(user_ids or [])

    if not user_ids:
        raise ValidationError("At least one user required for split")

    if len(user_ids) != len(set(user_ids)):
        raise ValidationError("Duplicate users found in splits")

    count = len(user_ids)
    share = round_half_up_to_cents(total.to_decimal() / count)
    last = total - share * (count - 1)

    if last < ZERO:
        raise ValidationError(f"Amount {total} is too small to split among {count} users")

    splits = [Split(user_id=uid, amount=share) for uid in user_ids[:-1]]
    splits.append(Split(user_id=user_ids[-1], amount=last))
    return splits


def _exact_splits(total: Money, amounts: Mapping[int, Money]) -> List[Split]:
    if not isinstance(amounts, Mapping) or not amounts:
        raise ValidationError("Exact amounts required for EXACT split")

    parsed = {uid: Money.of(amt) for uid, amt in amounts.items()}

    if any(amt < ZERO for amt in parsed.values()):
        raise ValidationError("Split amounts cannot be negative")

    split_total = sum(parsed.values(), ZERO)
    if split_total != total:
        raise ValidationError(
            f"Exact amounts total ({split_total}) must equal expense amount ({total})"
        )

    return [Split(user_id=uid, amount=amt) for uid, amt in parsed.items()]


def _percentage_splits(total: Money, percentages: Mapping[int, Decimal]) -> List[Split]:
    if not isinstance(percentages, Mapping) or not percentages:
        raise ValidationError("Percentages required for PERCENTAGE split")

    parsed: Dict[int, Decimal] = {uid: _as_percentage(p) for uid, p in percentages.items()}

    if any(p < 0 for p in parsed.values()):
        raise ValidationError("Percentages cannot be negative")

    total_pct = sum(parsed.values(), Decimal("0"))
    if total_pct != HUNDRED:
        raise ValidationError(f"Percentages must sum to 100, got: {total_pct}")

    user_ids = sorted(parsed)
    running = ZERO
    splits = []

    for uid in user_ids[:-1]:
        amount = round_half_up_to_cents(total.to_decimal() * parsed[uid] / HUNDRED)
        running += amount
        splits.append(Split(user_id=uid, amount=amount, percentage=parsed[uid]))

    last = user_ids[-1]
    remainder = total - running

    if remainder < ZERO:
        raise ValidationError(f"Amount {total} is too small to split by these percentages")

    splits.append(Split(user_id=last, amount=remainder, percentage=parsed[last]))
    return splits


def _as_percentage(value) -> Decimal:
    if isinstance(value, (float, bool)):
        raise ValidationError(f"Percentage must be a decimal value, got {value!r}")
    try:
        pct = Decimal(value) if not isinstance(value, Decimal) else value
        quantized = pct.quantize(PERCENT_SCALE) if pct.is_finite() else None
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Invalid percentage: {value!r}")
    if quantized is None:
        raise ValidationError(f"Invalid percentage: {value!r}")
    # stored as Numeric(7, 4)
    if pct != quantized:
        raise ValidationError(f"Percentage has more than 4 decimal places: {value}")
    return pct
