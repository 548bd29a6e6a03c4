"""Reading operations from, and writing decisions to, newline-delimited JSON."""

import datetime as dt
import json
import re
from typing import IO, Iterable, Iterator

import ndjson

from autorizador.errors import OperationParseError, TimestampParseError, UnknownOperationError
from autorizador.logging import get_logger
from autorizador.models import (
    Account,
    AccountRecord,
    Decision,
    OperationRecord,
    Transaction,
    TransactionRecord,
)

logger = get_logger(__name__)

# datetime holds microseconds; RFC 3339 allows any number of fraction digits
_FRACTION = re.compile(r"([Tt ]\d{2}:\d{2}:\d{2})\.(\d+)")


def read_operations(stream: Iterable[str]) -> Iterator[OperationRecord]:
    """Yield one record per valid line, skipping and reporting the rest."""
    for number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield parse_operation(line)
        except OperationParseError as e:
            logger.warning("operation_skipped", line=number, reason=e.message, **e.details)


def parse_operation(line: str) -> OperationRecord:
    try:
        payload = json.loads(line)
    except ValueError as e:
        raise OperationParseError("invalid json", {"error": str(e)}) from e

    if not isinstance(payload, dict):
        raise OperationParseError("expected a json object")

    if payload.get("account") is not None:
        return AccountRecord(parse_account(payload["account"]))
    if payload.get("transaction") is not None:
        return TransactionRecord(parse_transaction(payload["transaction"]))
    raise UnknownOperationError("unknown operation", {"keys": sorted(payload)})


def parse_account(data) -> Account:
    _expect_object(data, "account")
    active_card = _field(data, "active-card", bool)
    available_limit = _field(data, "available-limit", int)
    if available_limit < 0:
        raise OperationParseError("negative available-limit", {"available-limit": available_limit})
    return Account(active_card=active_card, available_limit=available_limit)


def parse_transaction(data) -> Transaction:
    _expect_object(data, "transaction")
    merchant = _field(data, "merchant", str)
    amount = _field(data, "amount", int)
    if amount < 0:
        raise OperationParseError("negative amount", {"amount": amount})
    time = parse_time(_field(data, "time", str))
    return Transaction(merchant=merchant, amount=amount, time=time)


def parse_time(value: str) -> dt.datetime:
    # fromisoformat only learned the "Z" suffix in 3.11
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    text = _FRACTION.sub(lambda m: f"{m.group(1)}.{m.group(2)[:6].ljust(6, '0')}", text)
    try:
        time = dt.datetime.fromisoformat(text)
    except ValueError as e:
        raise TimestampParseError("invalid time", {"time": value}) from e
    if time.tzinfo is None or time.utcoffset() is None:
        raise TimestampParseError("time without utc offset", {"time": value})
    return time


def write_decision(stream: IO[str], decision: Decision) -> None:
    ndjson.writer(stream).writerow(decision.to_dict())
    stream.flush()


def _expect_object(data, name: str) -> None:
    if not isinstance(data, dict):
        raise OperationParseError(f"{name} must be an object")


def _field(data: dict, name: str, kind: type):
    if name not in data:
        raise OperationParseError(f"missing {name}")
    value = data[name]
    # bool is a subclass of int, but true is not an amount
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise OperationParseError(f"invalid {name}", {name: value})
    return value
