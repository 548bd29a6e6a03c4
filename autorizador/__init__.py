from autorizador.authorizer import Authorizer
from autorizador.models import (
    Account,
    AccountRecord,
    AuthorizerState,
    Decision,
    Transaction,
    TransactionRecord,
)
from autorizador.rules import authorize, initialize

__all__ = [
    "Account",
    "AccountRecord",
    "Authorizer",
    "AuthorizerState",
    "Decision",
    "Transaction",
    "TransactionRecord",
    "authorize",
    "initialize",
]
