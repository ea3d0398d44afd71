from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple
from shareledger.core.errors import ValidationError
from shareledger.core.money import Money, ZERO


class SplitPolicy(str, Enum):
    EQUAL = "EQUAL"
    EXACT = "EXACT"
    PERCENTAGE = "PERCENTAGE"


@dataclass(frozen=True)
class Split:
    user_id: int
    amount: Money
    percentage: Optional[Decimal] = None  # informational, PERCENTAGE only
    expense_id: Optional[int] = None


@dataclass(frozen=True)
class Expense:
    id: Optional[int]
    group_id: int
    description: Optional[str]
    total_amount: Money
    payer_id: int
    split_policy: SplitPolicy
    splits: Tuple[Split, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Settlement:
    id: Optional[int]
    group_id: int
    payer_id: int
    payee_id: int
    amount: Money

    def __post_init__(self):
        if self.payer_id == self.payee_id:
            raise ValidationError("Payer and payee cannot be the same")
        if self.amount <= ZERO:
            raise ValidationError(f"Settlement amount must be positive, got {self.amount}")


@dataclass(frozen=True)
class Transfer:
    """`from_user_id` owes `to_user_id` this amount."""
    from_user_id: int
    to_user_id: int
    amount: Money


@dataclass(frozen=True)
class Summary:
    user_id: int
    user_name: str
    total_owed: Money   # what the user owes others
    total_owing: Money  # what others owe the user
    net_balance: Money  # positive = others owe the user
    debts: Tuple[Transfer, ...] = ()
    credits: Tuple[Transfer, ...] = ()

    @property
    def is_settled(self) -> bool:
        return self.net_balance == ZERO
