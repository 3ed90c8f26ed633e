# fee_tally/controllers/fee_accumulator.py
"""
Fee filtering and accumulation.

One pass over the data rows of a ``LedgerTable``. A row counts as a fee when
its date falls inside the (inclusive) ``DateRange`` and its description
contains at least one fee keyword, compared case-sensitively.

Any row whose date cannot be parsed aborts the run, whether or not it would
have been in range; likewise an unparseable amount on a matching row. A bad
row usually means the export layout changed, and skipping it would silently
corrupt the total.
"""
from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, List, Optional, Sequence

from fee_tally.config import FeeTallyConfig
from fee_tally.data_model import (
    UNRESOLVED,
    ColumnIndexSet,
    DateRange,
    FeeLine,
    FeeSummary,
    LedgerTable,
)
from fee_tally.errors import ColumnNotFoundError, MalformedInputError
from fee_tally.utilities.converters_scalar import to_date, to_decimal

log = logging.getLogger(__name__)

RowCallback = Callable[[int, Optional[FeeLine]], None]


def contains_fee(description: str, keywords: Iterable[str]) -> bool:
    """True if any keyword occurs in ``description`` (case-sensitive)."""
    return any(k in description for k in keywords)


def _field(
    row: Sequence[str], index: int, header_name: str, row_number: int
) -> str:
    if index == UNRESOLVED:
        raise ColumnNotFoundError(header_name, row_number)
    if index >= len(row):
        raise MalformedInputError(
            f"row has {len(row)} field(s), no {header_name!r} column "
            f"(expected at position {index + 1})",
            row_number,
        )
    return row[index]


def _row_date(
    row: Sequence[str], columns: ColumnIndexSet, config: FeeTallyConfig, n: int
) -> date:
    raw = _field(row, columns.date, config.date_header, n)
    try:
        return to_date(raw, config.ledger_date_format, strict=True)
    except ValueError as e:
        raise MalformedInputError(
            f"cannot read date {raw!r} (expected format {config.ledger_date_format})",
            n,
        ) from e


def _row_amount(
    row: Sequence[str], columns: ColumnIndexSet, config: FeeTallyConfig, n: int
) -> Decimal:
    raw = _field(row, columns.amount, config.amount_header, n)
    try:
        return to_decimal(raw)
    except ValueError as e:
        raise MalformedInputError(f"cannot process the amount {raw!r}", n) from e


def accumulate_fees(
    table: LedgerTable,
    columns: ColumnIndexSet,
    date_range: DateRange,
    config: FeeTallyConfig,
    on_row: Optional[RowCallback] = None,
) -> FeeSummary:
    """Sum the fee amounts of ``table`` inside ``date_range``.

    Parameters
    ----------
    table : LedgerTable
        Loaded ledger; only ``table.rows`` are iterated.
    columns : ColumnIndexSet
        Indices from ``resolve_columns``.
    date_range : DateRange
        Inclusive range; an inverted range matches nothing.
    config : FeeTallyConfig
        Supplies the fee keywords, the in-file date format and the header names
        used in error messages.
    on_row : callable, optional
        Called as ``on_row(row_number, fee_line_or_None)`` after each row.

    Returns
    -------
    FeeSummary
        Exact Decimal total, rows processed and the matching lines.

    Raises
    ------
    MalformedInputError
        On the first row with an unreadable date, or a matching row with an
        unreadable amount. No partial result is returned.
    ColumnNotFoundError
        If a column needed by a row was never resolved.
    """
    keywords = config.fee_keywords
    total = Decimal("0")
    lines: List[FeeLine] = []
    row_number = 0

    for row in table.rows:
        row_number += 1
        matched: Optional[FeeLine] = None

        row_date = _row_date(row, columns, config, row_number)
        if row_date in date_range:
            description = _field(
                row, columns.description, config.description_header, row_number
            )
            if contains_fee(description, keywords):
                amount = _row_amount(row, columns, config, row_number)
                total += amount
                matched = FeeLine(row_number, row_date, description, amount)
                lines.append(matched)
                log.debug("Line %d matched: %s %s", row_number, description, amount)

        if on_row is not None:
            on_row(row_number, matched)

    log.info(
        "Processed %d rows, %d fee line(s), total %s for %s..%s",
        row_number,
        len(lines),
        total,
        date_range.start,
        date_range.end,
    )
    return FeeSummary(
        date_range=date_range,
        total=total,
        rows_processed=row_number,
        lines=tuple(lines),
    )
