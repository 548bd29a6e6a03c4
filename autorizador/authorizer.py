from typing import Iterable, Iterator

from autorizador.logging import get_logger
from autorizador.models import (
    AccountRecord,
    AuthorizerState,
    Decision,
    OperationRecord,
    TransactionRecord,
)
from autorizador.rules import authorize, initialize

logger = get_logger(__name__)


class Authorizer():
    """Feeds operations through the rules in arrival order, one at a time.

    Owns the only mutable state of a run: the current account, the history
    of every processed operation and the decisions made so far.
    """

    def __init__(self) -> None:
        self.state = AuthorizerState()
        self.history: list[OperationRecord] = []
        self.decisions: list[Decision] = []

    def process(self, record: OperationRecord) -> Decision:
        if isinstance(record, AccountRecord):
            decision = initialize(record.account, self.state)
            kind = "account"
        elif isinstance(record, TransactionRecord):
            decision = authorize(record.transaction, self.state, self.history)
            kind = "transaction"
        else:
            raise TypeError(f"unsupported operation record: {record!r}")

        if decision.approved:
            self.state = AuthorizerState(account=decision.account)

        self.history.append(record)
        self.decisions.append(decision)
        logger.debug(
            "operation_processed",
            kind=kind,
            violations=list(decision.violations),
            available_limit=decision.account.available_limit,
        )
        return decision

    def run(self, records: Iterable[OperationRecord]) -> Iterator[Decision]:
        for record in records:
            yield self.process(record)
