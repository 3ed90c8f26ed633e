# fee_tally/__init__.py
"""
Sum bank-fee lines of a CSV transaction export over a date range.
"""
from .config import DEFAULT_FEE_KEYWORDS, FeeTallyConfig, load_config
from .controllers import (
    LedgerSession,
    ScriptedInputProvider,
    accumulate_fees,
    contains_fee,
    load_ledger,
    resolve_columns,
    resolve_date_range,
    write_fee_report,
)
from .data_model import ColumnIndexSet, DateRange, FeeLine, FeeSummary, LedgerTable
from .errors import (
    ColumnNotFoundError,
    ConfigError,
    FeeTallyError,
    InvalidDateEntryError,
    LedgerIOError,
    MalformedInputError,
    UsageError,
)

__all__ = [
    "DEFAULT_FEE_KEYWORDS",
    "ColumnIndexSet",
    "ColumnNotFoundError",
    "ConfigError",
    "DateRange",
    "FeeLine",
    "FeeSummary",
    "FeeTallyConfig",
    "FeeTallyError",
    "InvalidDateEntryError",
    "LedgerIOError",
    "LedgerSession",
    "LedgerTable",
    "MalformedInputError",
    "ScriptedInputProvider",
    "UsageError",
    "accumulate_fees",
    "contains_fee",
    "load_config",
    "load_ledger",
    "resolve_columns",
    "resolve_date_range",
    "write_fee_report",
]
