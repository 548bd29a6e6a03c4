"""Pytest fixtures for testing"""

import datetime as dt

import pytest
import structlog
from structlog.testing import LogCapture

from autorizador.models import Account, AccountRecord, Transaction, TransactionRecord

BASE_TIME = dt.datetime(2019, 2, 13, 11, 0, 0, tzinfo=dt.timezone.utc)


def at(seconds: float) -> dt.datetime:
    return BASE_TIME + dt.timedelta(seconds=seconds)


def purchase(merchant: str, amount: int, seconds: float) -> TransactionRecord:
    return TransactionRecord(Transaction(merchant=merchant, amount=amount, time=at(seconds)))


@pytest.fixture(name="log_output")
def fixture_log_output() -> LogCapture:
    return LogCapture()


@pytest.fixture(autouse=True)
def fixture_configure_structlog(log_output: LogCapture):
    structlog.configure(processors=[log_output])
    yield
    structlog.reset_defaults()


@pytest.fixture
def starter_account() -> Account:
    """Active account with the starter limit of 100"""
    return Account(active_card=True, available_limit=100)


@pytest.fixture
def starter_record(starter_account: Account) -> AccountRecord:
    return AccountRecord(starter_account)
