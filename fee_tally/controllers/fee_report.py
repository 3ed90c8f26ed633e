"""
Export of matched fee lines.

Writes one row per ``FeeLine`` of a ``FeeSummary`` so the total can be checked
line by line in a spreadsheet. ``.xlsx`` targets go through pandas' Excel
writer (requires openpyxl); every other suffix is written as CSV.
"""

# fee_tally/controllers/fee_report.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from fee_tally.data_model import DateRange, FeeSummary
from fee_tally.errors import LedgerIOError

log = logging.getLogger(__name__)

REPORT_COLUMNS: List[str] = ["Row", "Date", "Description", "Amount"]


def fee_lines_frame(summary: FeeSummary) -> pd.DataFrame:
    """Matched lines as a DataFrame with typed columns (Amount as float for spreadsheets)."""
    df = pd.DataFrame(
        [line.to_dict() for line in summary.lines], columns=REPORT_COLUMNS
    )
    df["Row"] = df["Row"].astype(int)
    df["Amount"] = df["Amount"].astype(float)
    return df


def report_path_for(base: Path, date_range: DateRange) -> Path:
    """``fees.csv`` -> ``fees_20230701-20230731.csv`` so each range keeps its own file."""
    base = Path(base)
    span = f"{date_range.start:%Y%m%d}-{date_range.end:%Y%m%d}"
    return base.with_name(f"{base.stem}_{span}{base.suffix}")


def write_fee_report(summary: FeeSummary, path: Path) -> Path:
    path = Path(path)
    df = fee_lines_frame(summary)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() == ".xlsx":
            df.to_excel(path, index=False, sheet_name="Fees")
        else:
            df.to_csv(path, index=False, encoding="utf-8")
    except OSError as e:
        raise LedgerIOError(path, f"Cannot write report ({e.strerror or e})") from e
    log.info("Wrote %d fee line(s) to %s", len(df), path)
    return path
