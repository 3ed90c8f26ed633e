# tests/controllers/test_ledger_loader.py
from __future__ import annotations

import logging
from datetime import date
from pathlib import Path

import pytest

from fee_tally.config import FeeTallyConfig
from fee_tally.controllers.ledger_loader import (
    load_ledger,
    resolve_column,
    resolve_columns,
)
from fee_tally.controllers.fee_accumulator import accumulate_fees
from fee_tally.data_model import UNRESOLVED, ColumnIndexSet, DateRange
from fee_tally.errors import LedgerIOError, MalformedInputError

DATA = Path(__file__).resolve().parents[1] / "data"


def _write(path: Path, text: str, encoding: str = "utf-8") -> Path:
    path.write_text(text, encoding=encoding)
    return path


def test_load_ledger_splits_header_and_rows():
    table = load_ledger(DATA / "scenario.csv", FeeTallyConfig())
    assert table.header == ("Date Trx", "Description", "Debit")
    assert len(table) == 3
    assert table.rows[1] == ("05-Jul-23", "Frais bancaires", "-5.50")


def test_load_ledger_keeps_variable_width_rows(tmp_path):
    p = _write(
        tmp_path / "ragged.csv",
        "Date Trx,Description,Debit\n01-Jul-23,a\n02-Jul-23,b,1,extra,fields\n",
    )
    table = load_ledger(p, FeeTallyConfig())
    assert table.rows == (("01-Jul-23", "a"), ("02-Jul-23", "b", "1", "extra", "fields"))


def test_load_ledger_strips_utf8_bom(tmp_path):
    p = tmp_path / "bom.csv"
    p.write_bytes("\ufeffDate Trx,Description,Debit\n".encode("utf-8"))
    table = load_ledger(p, FeeTallyConfig())
    assert table.header[0] == "Date Trx"


def test_load_ledger_quoted_fields_with_delimiter(tmp_path):
    p = _write(
        tmp_path / "quoted.csv",
        'Date Trx,Description,Debit\n01-Jul-23,"frais, commission",-1.00\n',
    )
    table = load_ledger(p, FeeTallyConfig())
    assert table.rows[0][1] == "frais, commission"


def test_load_ledger_custom_delimiter(tmp_path):
    p = _write(tmp_path / "semi.csv", "Date Trx;Description;Debit\n01-Jul-23;frais;-1\n")
    table = load_ledger(p, FeeTallyConfig(delimiter=";"))
    assert table.rows[0] == ("01-Jul-23", "frais", "-1")


def test_load_ledger_empty_file_warns_and_returns_empty_table(tmp_path, caplog):
    p = _write(tmp_path / "empty.csv", "")
    with caplog.at_level(logging.WARNING, logger="fee_tally"):
        table = load_ledger(p, FeeTallyConfig())
    assert table.is_empty
    assert table.header == () and table.rows == ()
    assert "empty" in caplog.text


def test_load_ledger_missing_file_raises_ledger_io_error(tmp_path):
    missing = tmp_path / "nope.csv"
    with pytest.raises(LedgerIOError) as ei:
        load_ledger(missing, FeeTallyConfig())
    assert ei.value.path == missing
    assert isinstance(ei.value, OSError)


def test_load_ledger_directory_raises_ledger_io_error(tmp_path):
    with pytest.raises(LedgerIOError):
        load_ledger(tmp_path, FeeTallyConfig())


def test_load_ledger_undecodable_content_is_malformed(tmp_path):
    p = tmp_path / "latin1.csv"
    p.write_bytes("Date Trx,Description,Debit\n01-Jul-23,d\xe9bit frais,-1\n".encode("latin-1"))
    with pytest.raises(MalformedInputError):
        load_ledger(p, FeeTallyConfig())


def test_load_ledger_honours_configured_encoding(tmp_path):
    p = tmp_path / "latin1.csv"
    p.write_bytes("Date Trx,Description,Debit\n01-Jul-23,d\xe9bit frais,-1\n".encode("latin-1"))
    table = load_ledger(p, FeeTallyConfig(encoding="latin-1"))
    assert table.rows[0][1] == "débit frais"


def test_load_ledger_unterminated_quote_in_strict_mode_is_malformed(tmp_path, monkeypatch):
    import csv

    real_reader = csv.reader
    monkeypatch.setattr(
        "fee_tally.controllers.ledger_loader.csv.reader",
        lambda f, **kw: real_reader(f, strict=True, **kw),
    )
    p = _write(tmp_path / "bad.csv", 'Date Trx,Description,Debit\n01-Jul-23,"frais"x,-1\n')
    with pytest.raises(MalformedInputError) as ei:
        load_ledger(p, FeeTallyConfig())
    assert ei.value.row_number == 2


def test_load_ledger_skips_blank_lines(tmp_path):
    p = _write(
        tmp_path / "blanks.csv",
        "Date Trx,Description,Debit\n01-Jul-23,frais,-1.00\n\n02-Jul-23,frais,-2.00\n\n",
    )
    cfg = FeeTallyConfig(fee_keywords=("frais",))
    table = load_ledger(p, cfg)
    assert table.rows == (("01-Jul-23", "frais", "-1.00"), ("02-Jul-23", "frais", "-2.00"))

    summary = accumulate_fees(
        table,
        resolve_columns(table.header, cfg),
        DateRange(date(2023, 7, 1), date(2023, 7, 31)),
        cfg,
    )
    assert summary.rows_processed == 2
    assert summary.formatted_total == "-3.00"
    assert [line.row_number for line in summary.lines] == [1, 2]


def test_load_ledger_leading_blank_line_before_header(tmp_path):
    p = _write(tmp_path / "lead.csv", "\nDate Trx,Description,Debit\n01-Jul-23,frais,-1\n")
    table = load_ledger(p, FeeTallyConfig())
    assert table.header == ("Date Trx", "Description", "Debit")
    assert len(table) == 1


# ---------- resolve_column(s) ----------


@pytest.mark.parametrize(
    "header,name,expected",
    [
        (["Date Trx", "Description", "Debit"], "Debit", 2),
        (["Debit", "Debit"], "Debit", 0),
        (["date trx"], "Date Trx", UNRESOLVED),
        (["Date Trx "], "Date Trx", UNRESOLVED),
        ([], "Debit", UNRESOLVED),
    ],
)
def test_resolve_column_exact_first_match(header, name, expected):
    assert resolve_column(header, name) == expected


def test_resolve_columns_by_name_not_position():
    cfg = FeeTallyConfig()
    cols = resolve_columns(("Debit", "Solde", "Date Trx", "Description"), cfg)
    assert cols == ColumnIndexSet(date=2, description=3, amount=0)


def test_resolve_columns_reports_missing_without_raising(caplog):
    with caplog.at_level(logging.WARNING, logger="fee_tally"):
        cols = resolve_columns(("Date", "Description", "Debit"), FeeTallyConfig())
    assert cols.date == UNRESOLVED
    assert cols.unresolved() == ("date",)
    assert "date" in caplog.text


def test_resolve_columns_on_empty_header_is_all_unresolved():
    cols = resolve_columns((), FeeTallyConfig())
    assert cols.unresolved() == ("date", "description", "amount")
