# fee_tally/controllers/ledger_loader.py
"""
Ledger loading and header resolution.

A bank export is read with the ``csv`` module into a ``LedgerTable``: the
first record is the header, everything after it is data. Records may carry
any number of fields. Columns are then located by exact header caption.
"""
from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from fee_tally.config import FeeTallyConfig
from fee_tally.data_model import UNRESOLVED, ColumnIndexSet, LedgerTable
from fee_tally.errors import LedgerIOError, MalformedInputError
from fee_tally.utilities.core_util import open_for_read

log = logging.getLogger(__name__)


def load_ledger(path: Path, config: FeeTallyConfig) -> LedgerTable:
    """Read ``path`` into a ``LedgerTable``.

    Raises
    ------
    LedgerIOError
        If the file cannot be opened or read.
    MalformedInputError
        If the content cannot be decoded or split into records.
    """
    path = Path(path)
    log.info("Loading ledger: %s", path)
    try:
        f = open_for_read(path, binary=False, encoding=config.encoding, newline="")
    except OSError as e:
        raise LedgerIOError(path, f"Cannot open ledger ({e.strerror or e})") from e

    with f:
        reader = csv.reader(f, delimiter=config.delimiter)
        try:
            records: List[Tuple[str, ...]] = [tuple(rec) for rec in reader if rec]
        except (csv.Error, UnicodeDecodeError) as e:
            raise MalformedInputError(
                f"File read error, {path.name} does not appear to be a delimited file ({e})",
                row_number=reader.line_num or None,
            ) from e
        except OSError as e:
            raise LedgerIOError(path, f"Cannot read ledger ({e.strerror or e})") from e

    if not records:
        log.warning("File appears to be empty: %s", path)
        return LedgerTable(header=(), rows=())

    header, rows = records[0], tuple(records[1:])
    log.debug("Loaded %d data rows from %s (header: %s)", len(rows), path, header)
    return LedgerTable(header=header, rows=rows)


def resolve_column(header: Sequence[str], name: str) -> int:
    """Index of the first header field equal to ``name``, or ``UNRESOLVED`` (-1)."""
    for index, value in enumerate(header):
        if value == name:
            return index
    return UNRESOLVED


def resolve_columns(header: Sequence[str], config: FeeTallyConfig) -> ColumnIndexSet:
    columns = ColumnIndexSet(
        date=resolve_column(header, config.date_header),
        description=resolve_column(header, config.description_header),
        amount=resolve_column(header, config.amount_header),
    )
    missing = columns.unresolved()
    if missing and header:
        # The error surfaces when a data row first needs the column.
        log.warning(
            "Header %s lacks configured column(s): %s",
            list(header),
            ", ".join(missing),
        )
    return columns
