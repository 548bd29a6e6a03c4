import datetime as dt
from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class Account:
    active_card: bool = False
    available_limit: int = 0

    def debit(self, amount: int) -> "Account":
        return replace(self, available_limit=self.available_limit - amount)

    def to_dict(self) -> dict:
        return {
            "active-card": self.active_card,
            "available-limit": self.available_limit,
        }


@dataclass(frozen=True)
class Transaction:
    merchant: str
    amount: int
    time: dt.datetime

    def is_same_purchase(self, other: "Transaction") -> bool:
        return self.merchant == other.merchant and self.amount == other.amount


@dataclass(frozen=True)
class AccountRecord:
    account: Account


@dataclass(frozen=True)
class TransactionRecord:
    transaction: Transaction


OperationRecord = Union[AccountRecord, TransactionRecord]


@dataclass(frozen=True)
class Decision:
    """Outcome of one operation: the resulting account and what was violated."""

    account: Account
    violations: tuple = ()

    @property
    def approved(self) -> bool:
        return len(self.violations) == 0

    def to_dict(self) -> dict:
        return {
            "account": self.account.to_dict(),
            "violations": list(self.violations),
        }


@dataclass(frozen=True)
class AuthorizerState:
    account: Optional[Account] = None

    @property
    def present(self) -> bool:
        return self.account is not None
