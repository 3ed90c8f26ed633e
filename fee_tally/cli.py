#!/usr/bin/env python3
"""
Bank fee tally (command line)

Drag a bank ``.csv`` export onto the program (or pass it as the only
argument), enter a date range, and get the sum of the fee lines in that range.

Features:
- Start date + end date, or 'q' (end of quinzaine) / 'm' (end of month)
- Repeat for another range over the same file without reloading it
- Optional export of the matched lines (--report fees.csv / fees.xlsx)
- Header captions, date formats and fee keywords overridable with --config
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TextIO

from fee_tally.config import FeeTallyConfig, load_config
from fee_tally.controllers.date_range import ConsoleInputProvider, resolve_date_range
from fee_tally.controllers.fee_report import report_path_for, write_fee_report
from fee_tally.controllers.session import LedgerSession
from fee_tally.data_model import FeeLine, FeeSummary, IInputProvider
from fee_tally.errors import FeeTallyError, UsageError
from fee_tally.utilities.config_logging import configure_logging
from fee_tally.utilities.converters_scalar import format_amount
from fee_tally.utilities.core_util import is_null_or_whitespace

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

BANNER = r"""
  _____            _____     _ _
 |  ___|__  ___   |_   _|_ _| | |_   _
 | |_ / _ \/ _ \    | |/ _` | | | | | |
 |  _|  __/  __/    | | (_| | | | |_| |
 |_|  \___|\___|    |_|\__,_|_|_|\__, |
                                 |___/
"""

NO_FILE_MESSAGE = (
    "This program is designed for drag-and-drop. "
    "Please drag the .csv file onto the program."
)
MANY_FILES_MESSAGE = "This program can only handle one file at a time."
AGAIN_PROMPT = "Process another date range for this file? [y/N] "
EXIT_PROMPT = "Press ENTER to exit"


# region Output


class ProgressPrinter:
    """Per-row progress: a single self-overwriting counter, or one line per row when verbose."""

    def __init__(self, out: TextIO, verbose: bool = False):
        self.out = out
        self.verbose = verbose

    def __call__(self, row_number: int, line: Optional[FeeLine]) -> None:
        if self.verbose:
            self.out.write(f"\nProcessing line {row_number}… ")
            if line is not None:
                self.out.write(format_amount(line.amount))
        else:
            self.out.write(f"\rProcessing line {row_number}…")
        self.out.flush()

    def finish(self) -> None:
        self.out.write("\n" if self.verbose else "\r")
        self.out.flush()


def print_summary(summary: FeeSummary, out: TextIO) -> None:
    print(f"Processed {summary.rows_processed} lines", file=out)
    print("=" * 29, file=out)
    print(f"TOTAL: {summary.formatted_total}", file=out)


# endregion Output

# region Argument handling


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fee-tally",
        description="Sum bank fees in a date range from a bank CSV export.",
    )
    ap.add_argument("ledger", nargs="*", type=Path, help="Path to the .csv export")
    ap.add_argument(
        "--config",
        type=Path,
        help="JSON file overriding header names, date formats or fee keywords",
    )
    ap.add_argument(
        "--verbose", action="store_true", help="Show every line and matched amount"
    )
    ap.add_argument(
        "--report",
        type=Path,
        help="Write the matched fee lines to this .csv or .xlsx file "
        "(one file per date range, named with the range dates)",
    )
    ap.add_argument("--log-file", type=Path, help="Also write a debug log here")
    ap.add_argument(
        "--no-pause",
        action="store_true",
        help="Do not wait for ENTER before exiting",
    )
    return ap


def single_ledger(paths: Sequence[Path]) -> Path:
    if len(paths) < 1:
        raise UsageError(NO_FILE_MESSAGE)
    if len(paths) > 1:
        raise UsageError(MANY_FILES_MESSAGE)
    return paths[0]


# endregion Argument handling

# region Run loop


def run_session(
    session: LedgerSession,
    provider: IInputProvider,
    out: TextIO,
    report: Optional[Path] = None,
) -> List[FeeSummary]:
    """Tally date ranges over one ledger until the user declines another one."""
    config = session.config
    session.load()
    summaries: List[FeeSummary] = []
    echo: Callable[[str], None] = lambda msg: print(msg, file=out)

    while True:
        date_range = resolve_date_range(provider, config, echo)
        echo(
            "Processing transactions from "
            f"{date_range.start.strftime(config.display_date_format)} to "
            f"{date_range.end.strftime(config.display_date_format)}"
        )
        progress = ProgressPrinter(out, verbose=config.verbose)
        summary = session.tally(date_range, on_row=progress)
        progress.finish()
        print_summary(summary, out)
        summaries.append(summary)

        if report is not None:
            written = write_fee_report(summary, report_path_for(report, date_range))
            echo(f"Fee lines written to {written}")

        try:
            answer = provider.read_line(AGAIN_PROMPT)
        except EOFError:
            # results are already shown; closed input just ends the loop
            return summaries
        if is_null_or_whitespace(answer) or answer.strip()[0] not in "yY":
            return summaries


def pause(provider: IInputProvider, out: TextIO) -> None:
    print(EXIT_PROMPT, file=out)
    try:
        provider.read_line("")
    except EOFError:
        pass


def main(
    argv: Optional[Sequence[str]] = None,
    provider: Optional[IInputProvider] = None,
    out: TextIO | None = None,
) -> int:
    out = out or sys.stdout
    provider = provider or ConsoleInputProvider()
    args = build_parser().parse_args(argv)
    configure_logging(args.log_file, verbose=args.verbose)

    print(BANNER, file=out)
    try:
        ledger = single_ledger(args.ledger)
        config = load_config(args.config) if args.config else FeeTallyConfig()
        if args.verbose:
            config = config.with_overrides(verbose=True)

        run_session(LedgerSession(ledger, config), provider, out, args.report)
        code = EXIT_OK
    except UsageError as e:
        print(e, file=out)
        code = EXIT_USAGE
    except FeeTallyError as e:
        log.error("%s", e)
        print(f"\nError: {e}", file=out)
        code = EXIT_FAILURE
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed, exiting.", file=out)
        return EXIT_FAILURE

    if not args.no_pause:
        pause(provider, out)
    return code


# endregion Run loop


if __name__ == "__main__":
    sys.exit(main())
