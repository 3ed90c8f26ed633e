from .date_range import (
    ConsoleInputProvider,
    ScriptedInputProvider,
    half_month_end,
    month_end,
    parse_entry_date,
    prompt_end_date,
    prompt_start_date,
    resolve_date_range,
    resolve_end_date,
)
from .fee_accumulator import accumulate_fees, contains_fee
from .fee_report import report_path_for, write_fee_report
from .ledger_loader import load_ledger, resolve_column, resolve_columns
from .session import LedgerSession

__all__ = [
    "ConsoleInputProvider",
    "LedgerSession",
    "ScriptedInputProvider",
    "accumulate_fees",
    "contains_fee",
    "half_month_end",
    "load_ledger",
    "month_end",
    "parse_entry_date",
    "prompt_end_date",
    "prompt_start_date",
    "resolve_column",
    "resolve_columns",
    "resolve_date_range",
    "report_path_for",
    "resolve_end_date",
    "write_fee_report",
]
