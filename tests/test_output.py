"""Tests for result serialization, storage mapping and the command line."""

import json

import pytest

from statement_engine import main as cli
from statement_engine.models import ProcessingResult
from statement_engine.output.writer import (
    prepare_for_storage,
    result_to_json,
    write_result_json,
    write_storage_json,
)


@pytest.fixture
def result(processor, sample_statement):
    return processor.process_text(sample_statement)


@pytest.fixture
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_result_to_json(result, sample_statement):
    payload = json.loads(result_to_json(result))
    assert payload["success"] is True
    assert payload["raw_text"] == sample_statement
    assert payload["summary"] == {
        "total_transactions": 5,
        "expense_count": 4,
        "income_count": 1,
        "date_range": {"start": "2024-01-03", "end": "2024-02-01"},
    }
    payroll = payload["transactions"][-1]
    assert payroll["amount"] == 2500.0
    assert payroll["amount_display"] == "+2500.00"
    assert payroll["type"] == "income"
    assert payroll["raw_line"] == "02/01/2024 PAYROLL DEPOSIT $2500.00 CR"


def test_result_to_json_without_raw_text(result):
    payload = json.loads(result_to_json(result, include_raw_text=False))
    assert "raw_text" not in payload


def test_failure_result_to_json():
    payload = json.loads(result_to_json(ProcessingResult.failure("unreadable")))
    assert payload["success"] is False
    assert payload["transactions"] == []
    assert payload["error"] == "unreadable"
    assert payload["summary"]["date_range"] is None


def test_write_result_json(result, tmp_path):
    path = write_result_json(result, tmp_path / "out" / "result.json")
    assert json.loads(path.read_text(encoding="utf-8"))["summary"]["total_transactions"] == 5


def test_prepare_for_storage(result):
    records = prepare_for_storage(result.transactions, user_id=42)
    assert len(records) == 5
    assert all(record["user_id"] == 42 for record in records)
    assert all(record["receipt_path"] is None for record in records)
    assert records[0] == {
        "user_id": 42,
        "type": "expense",
        "amount": 15.99,
        "category": "Entertainment",
        "description": "Netflix subscription $",
        "date": "2024-01-03",
        "receipt_path": None,
    }


def test_write_storage_json(result, tmp_path):
    path = write_storage_json(result.transactions, "u-1", tmp_path / "records" / "u-1.json")
    records = json.loads(path.read_text(encoding="utf-8"))
    assert records == prepare_for_storage(result.transactions, "u-1")


def test_cli_storage_records_to_file(statement_txt, tmp_path, quiet_logging):
    out = tmp_path / "nested" / "records.json"
    assert cli.main([str(statement_txt), "--user-id", "7", "--out", str(out)]) == 0
    records = json.loads(out.read_text(encoding="utf-8"))
    assert len(records) == 5
    assert {record["user_id"] for record in records} == {"7"}


def test_transactions_are_immutable(result):
    with pytest.raises(Exception):
        result.transactions[0].amount = 0


def test_cli_prints_json(statement_txt, capsys, quiet_logging):
    assert cli.main([str(statement_txt), "--no-raw-text"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["summary"]["total_transactions"] == 5
    assert "raw_text" not in payload


def test_cli_storage_records(statement_txt, capsys, quiet_logging):
    assert cli.main([str(statement_txt), "--user-id", "7"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert {record["user_id"] for record in records} == {"7"}


def test_cli_writes_output_file(statement_txt, tmp_path, quiet_logging):
    out = tmp_path / "result.json"
    assert cli.main([str(statement_txt), "--out", str(out), "--workers", "2"]) == 0
    assert json.loads(out.read_text(encoding="utf-8"))["success"] is True


def test_cli_failure_exit_code(tmp_path, capsys, quiet_logging):
    assert cli.main([str(tmp_path / "missing.txt")]) == 1
    assert "Error" in capsys.readouterr().err
