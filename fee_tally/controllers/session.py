# fee_tally/controllers/session.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from fee_tally.config import FeeTallyConfig
from fee_tally.controllers.fee_accumulator import RowCallback, accumulate_fees
from fee_tally.controllers.ledger_loader import load_ledger, resolve_columns
from fee_tally.data_model import ColumnIndexSet, DateRange, FeeSummary, LedgerTable

log = logging.getLogger(__name__)


@dataclass
class LedgerSession:
    """
    One ledger loaded once, tallied for as many date ranges as requested.

    Responsibilities:
    • Load the table and resolve its columns on first use.
    • Run ``accumulate_fees`` for each requested ``DateRange``.
    """

    path: Path
    config: FeeTallyConfig = field(default_factory=FeeTallyConfig)
    table: Optional[LedgerTable] = None
    columns: Optional[ColumnIndexSet] = None

    def load(self) -> LedgerTable:
        if self.table is None:
            self.table = load_ledger(self.path, self.config)
            self.columns = resolve_columns(self.table.header, self.config)
        else:
            log.debug("Reusing loaded ledger %s (%d rows)", self.path, len(self.table))
        return self.table

    def tally(
        self, date_range: DateRange, on_row: Optional[RowCallback] = None
    ) -> FeeSummary:
        table = self.load()
        columns = self.columns
        if columns is None:
            # table assigned directly by the caller
            columns = self.columns = resolve_columns(table.header, self.config)
        return accumulate_fees(table, columns, date_range, self.config, on_row)
