"""End-to-end runs of the command-line entry point"""

import json

import pytest

from autorizador import cli

OPERATIONS = """\
{"account": {"active-card": true, "available-limit": 100}}
{"transaction": {"merchant": "Burger King", "amount": 20, "time": "2019-02-13T11:00:00.000Z"}}
{"transaction": {"merchant": "Habbib's", "amount": 90, "time": "2019-02-13T11:00:01.000Z"}}
this is not an operation
{"account": {"active-card": false, "available-limit": 350}}
{"transaction": {"merchant": "Burger King", "amount": 20, "time": "2019-02-13T11:00:30.000Z"}}
{"transaction": {"merchant": "McDonald's", "amount": 10, "time": "2019-02-13T11:01:00.000Z"}}
"""


@pytest.fixture(autouse=True)
def keep_test_logging(monkeypatch):
    monkeypatch.setattr(cli, "setup_logging", lambda: None)


def test_main_prints_one_decision_per_operation(tmp_path, capsys):
    path = tmp_path / "operations"
    path.write_text(OPERATIONS)

    assert cli.main([str(path)]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line) for line in lines] == [
        {"account": {"active-card": True, "available-limit": 100}, "violations": []},
        {"account": {"active-card": True, "available-limit": 80}, "violations": []},
        {"account": {"active-card": True, "available-limit": 80}, "violations": ["insufficient-limit"]},
        {"account": {"active-card": True, "available-limit": 80}, "violations": ["account-already-initialized"]},
        {"account": {"active-card": True, "available-limit": 80}, "violations": ["doubled-transaction"]},
        {
            "account": {"active-card": True, "available-limit": 80},
            "violations": ["high-frequency-small-interval"],
        },
    ]


def test_main_reports_skipped_lines(tmp_path, capsys, log_output):
    path = tmp_path / "operations"
    path.write_text("{}\n")

    cli.main([str(path)])

    assert capsys.readouterr().out == ""
    assert [e["event"] for e in log_output.entries] == ["operation_skipped"]


def test_main_missing_file(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "missing")])

    assert excinfo.value.code == 2
