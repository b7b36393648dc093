"""Tests for the command line entry point."""
from __future__ import annotations

import csv
import io
import json

import pytest

from statement_engine.cli import load_payload, main
from statement_engine.core.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


PARAMS = {
    "name": "Rahul Verma",
    "accountNumber": "50100234567890",
    "ifsc": "HDFC0001234",
    "bankName": "HDFC Bank",
    "employer": "Infosys",
    "salaryAmount": 50000,
    "durationMonths": 3,
    "template": "HDFC",
    "startingBalance": 10000,
    "numberOfTransactions": 60,
    "statementEndDate": "2025-06-30",
}


def _write(tmp_path, name: str, payload: dict) -> str:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_writes_json_statement(tmp_path) -> None:
    params = _write(tmp_path, "params.json", PARAMS)
    output = tmp_path / "statement.json"

    code = main([params, "--seed", "42", "--today", "2025-07-15", "--output", str(output)])

    assert code == 0
    statement = json.loads(output.read_text(encoding="utf-8"))
    assert statement["meta"]["seed"] == 42
    assert statement["meta"]["template"] == "HDFC"
    assert statement["meta"]["userType"] == "salaried"
    assert statement["details"]["accountNumber"] == "50100234567890"
    assert statement["transactions"]


def test_writes_csv_to_stdout(tmp_path, capsys) -> None:
    params = _write(tmp_path, "params.json", PARAMS)

    code = main([params, "--format", "csv", "--today", "2025-07-15", "--template", "SBI"])

    assert code == 0
    rows = list(csv.reader(io.StringIO(capsys.readouterr().out)))
    assert rows[0] == ["id", "date", "description", "reference", "debit", "credit", "balance", "kind"]
    assert len(rows) > 50
    assert {row[7] for row in rows[1:]} >= {"salary", "debit", "interest"}


def test_same_seed_gives_same_rows(tmp_path) -> None:
    params = _write(tmp_path, "params.json", PARAMS)
    first = tmp_path / "first.csv"
    second = tmp_path / "second.csv"

    main([params, "--format", "csv", "--today", "2025-07-15", "--output", str(first)])
    main([params, "--format", "csv", "--today", "2025-07-15", "--output", str(second)])

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_invalid_parameters_exit_with_error(tmp_path) -> None:
    params = _write(tmp_path, "params.json", {**PARAMS, "ifsc": "BAD"})
    assert main([params]) == 2


def test_missing_file_exits_with_error(tmp_path) -> None:
    assert main([str(tmp_path / "missing.json")]) == 2


def test_ocr_values_fill_gaps_only(tmp_path) -> None:
    params = _write(tmp_path, "params.json", {k: v for k, v in PARAMS.items() if k != "bankName"})
    ocr = _write(
        tmp_path,
        "ocr.json",
        {"bankName": "Kotak Mahindra Bank", "ifsc": "KKBK0000958", "endingBalance": 25000},
    )

    payload = load_payload(params, ocr)

    assert payload["bank_name"] == "Kotak Mahindra Bank"
    assert payload["ifsc"] == "HDFC0001234"
    assert payload["template"] == "HDFC"
    assert payload["closing_balance"] == 25000
