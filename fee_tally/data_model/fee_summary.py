from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Tuple

from fee_tally.data_model.interfaces import RecursiveDictStr
from fee_tally.utilities.converters_scalar import format_amount


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-date range. ``end < start`` is allowed and matches nothing."""
    start: date
    end: date

    def __contains__(self, d: date) -> bool:
        return self.start <= d <= self.end

    @property
    def is_inverted(self) -> bool:
        return self.end < self.start


@dataclass(frozen=True)
class FeeLine:
    row_number: int  # 1-based, header excluded
    date: date
    description: str
    amount: Decimal

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "Row": str(self.row_number),
            "Date": self.date.isoformat(),
            "Description": self.description,
            "Amount": format_amount(self.amount),
        }


@dataclass(frozen=True)
class FeeSummary:
    """
    Outcome of one pass over a ledger for one date range.
    ``total`` is the exact Decimal sum of ``lines``.
    """
    date_range: DateRange
    total: Decimal
    rows_processed: int
    lines: Tuple[FeeLine, ...] = ()

    @property
    def formatted_total(self) -> str:
        return format_amount(self.total)

    @property
    def match_count(self) -> int:
        return len(self.lines)
