# fee_tally/data_model/__init__.py
from .fee_summary import DateRange, FeeLine, FeeSummary
from .interfaces import EndDateShortcut, IInputProvider, IToDict, RecursiveDictStr
from .ledger_table import UNRESOLVED, ColumnIndexSet, LedgerTable

__all__ = [
    "ColumnIndexSet", "DateRange", "EndDateShortcut", "FeeLine", "FeeSummary",
    "IInputProvider", "IToDict", "LedgerTable", "RecursiveDictStr", "UNRESOLVED"]
