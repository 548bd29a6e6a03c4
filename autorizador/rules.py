"""Business rules for account creation and transaction authorization.

Both entry points are pure: they read the current state and the history of
previous operations and return a Decision. Threading the resulting state
from one operation to the next is the job of ``autorizador.authorizer``.
"""

import datetime as dt
from typing import Iterator, Optional, Sequence

from autorizador import violations as v
from autorizador.models import (
    Account,
    AccountRecord,
    AuthorizerState,
    Decision,
    OperationRecord,
    Transaction,
    TransactionRecord,
)

SMALL_INTERVAL = dt.timedelta(minutes=2)
STARTER_LIMIT = 100
HIGH_FREQUENCY_COUNT = 3
HIGH_FREQUENCY_MIN_HISTORY = 3


def initialize(incoming: Account, state: AuthorizerState) -> Decision:
    if state.present:
        return Decision(state.account, (v.ACCOUNT_ALREADY_INITIALIZED,))
    return Decision(incoming)


def authorize(
    transaction: Transaction,
    state: AuthorizerState,
    history: Sequence[OperationRecord],
) -> Decision:
    if not state.present:
        return Decision(Account(active_card=False, available_limit=0), (v.ACCOUNT_NOT_INITIALIZED,))

    account = state.account
    violation_checkers = [
        insufficient_limit,
        card_not_active,
        doubled_transaction,
        high_frequency_small_interval,
    ]

    violations = tuple(
        _violation_name(checker)
        for checker in violation_checkers
        if checker(transaction, account, history)
    )

    if violations:
        return Decision(account, violations)
    return Decision(account.debit(transaction.amount))


def insufficient_limit(transaction: Transaction, account: Account, history: Sequence[OperationRecord]) -> bool:
    return account.available_limit - transaction.amount < 0


def card_not_active(transaction: Transaction, account: Account, history: Sequence[OperationRecord]) -> bool:
    return not account.active_card


def doubled_transaction(transaction: Transaction, account: Account, history: Sequence[OperationRecord]) -> bool:
    return any(
        previous.is_same_purchase(transaction)
        for previous in _recent_transactions(history, transaction.time)
    )


def high_frequency_small_interval(
    transaction: Transaction, account: Account, history: Sequence[OperationRecord]
) -> bool:
    """Velocity rule for starter accounts.

    Applies only once more than three operations have been seen and only when
    the *first* account ever created was active with a limit of exactly 100,
    regardless of how the limit has moved since.
    """
    if len(history) <= HIGH_FREQUENCY_MIN_HISTORY:
        return False

    original = _original_account(history)
    if original is None or not (original.active_card and original.available_limit == STARTER_LIMIT):
        return False

    count = 0
    for _ in _recent_transactions(history, transaction.time):
        count += 1
        if count == HIGH_FREQUENCY_COUNT:
            return True
    return False


def _recent_transactions(history: Sequence[OperationRecord], time: dt.datetime) -> Iterator[Transaction]:
    # newest first; the window is open, two minutes apart is not recent
    for record in reversed(history):
        if isinstance(record, TransactionRecord) and time - record.transaction.time < SMALL_INTERVAL:
            yield record.transaction


def _original_account(history: Sequence[OperationRecord]) -> Optional[Account]:
    for record in history:
        if isinstance(record, AccountRecord):
            return record.account
    return None


def _violation_name(checker) -> str:
    return checker.__name__.replace("_", "-")
