# fee_tally/errors.py
"""
Exception types raised by the ledger loader, the date-range prompts and the
fee accumulator.

Data problems (``MalformedInputError``) abort the run. Date-entry problems
(``InvalidDateEntryError``) are caught by the prompt loops and re-asked.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class FeeTallyError(Exception):
    """Base class for every error this package raises on purpose."""


class UsageError(FeeTallyError):
    """The program was invoked with the wrong number of ledger files."""


class ConfigError(FeeTallyError, ValueError):
    """A configuration file is unreadable or holds unknown/invalid values."""


class LedgerIOError(FeeTallyError, OSError):
    """A ledger (or report) file could not be opened, read or written."""

    def __init__(self, path: Path | str, message: str) -> None:
        super().__init__(f"{message}: {path}")
        self.path = Path(path)


class MalformedInputError(FeeTallyError, ValueError):
    """The ledger content, or one of its rows, cannot be interpreted."""

    def __init__(self, message: str, row_number: Optional[int] = None) -> None:
        if row_number is not None:
            message = f"Line {row_number}: {message}"
        super().__init__(message)
        self.row_number = row_number


class ColumnNotFoundError(MalformedInputError):
    """A configured header name is missing from the ledger header row."""

    def __init__(self, header_name: str, row_number: Optional[int] = None) -> None:
        super().__init__(f"column {header_name!r} not found in header", row_number)
        self.header_name = header_name


class InvalidDateEntryError(FeeTallyError, ValueError):
    """A date typed at the prompt does not match the entry format."""

    def __init__(self, text: str, fmt: str) -> None:
        super().__init__(f"Invalid date {text!r} (expected format {fmt})")
        self.text = text
        self.fmt = fmt
