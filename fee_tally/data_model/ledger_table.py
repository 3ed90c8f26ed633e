from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

UNRESOLVED = -1


@dataclass(frozen=True)
class LedgerTable:
    """
    A delimited ledger as read from disk.
    The header is kept apart from the data rows; rows may have any number of fields.
    """
    header: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    @property
    def is_empty(self) -> bool:
        return not self.header and not self.rows

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ColumnIndexSet:
    date: int
    description: int
    amount: int

    def unresolved(self) -> Tuple[str, ...]:
        """Names of the fields ("date", "description", "amount") whose index is unresolved."""
        return tuple(
            name
            for name, idx in (
                ("date", self.date),
                ("description", self.description),
                ("amount", self.amount),
            )
            if idx == UNRESOLVED
        )
