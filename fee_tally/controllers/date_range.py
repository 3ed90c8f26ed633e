# fee_tally/controllers/date_range.py
"""
Interactive date-range resolution.

The start date is always typed as ``YYYY-MM-DD``. The end date may be typed
the same way, or replaced by a shortcut:

* ``q``: end of the quinzaine (the 15th when the start is in the first half
  of the month, otherwise the month end);
* ``m``: last day of the start's month.

Prompts go through an ``IInputProvider`` and re-ask forever on a bad entry;
only the provider running dry (``EOFError``) ends a loop early.
"""
from __future__ import annotations

import calendar
import logging
import re
from datetime import date
from typing import Callable, Iterable, Iterator, Optional

from fee_tally.config import FeeTallyConfig
from fee_tally.data_model import DateRange, EndDateShortcut, IInputProvider
from fee_tally.errors import InvalidDateEntryError
from fee_tally.utilities.converters_scalar import to_date

log = logging.getLogger(__name__)

ISO_ENTRY_FORMAT = "%Y-%m-%d"
QUINZAINE_DAY = 15

START_PROMPT = "Beginning date: "
END_PROMPT = "Ending date: "
START_HINT = (
    "Enter the beginning and ending dates to process using the format yyyy-mm-dd."
)
END_HINT = (
    "Enter the ending date. You can also enter 'q' to calculate to the end of "
    "the quinzaine or 'm' to calculate to the end of the month."
)
INVALID_DATE_MESSAGE = "Date is invalid."

_ISO_ENTRY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


# region Input providers


class ConsoleInputProvider:
    """Reads answers from the terminal with ``input()``."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)


class ScriptedInputProvider:
    """Replays a fixed sequence of answers, then raises ``EOFError``."""

    def __init__(self, answers: Iterable[str]):
        self._answers: Iterator[str] = iter(answers)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        try:
            return next(self._answers)
        except StopIteration:
            raise EOFError("no more scripted input") from None


# endregion Input providers

# region Date arithmetic


def parse_entry_date(text: str, fmt: str = ISO_ENTRY_FORMAT) -> date:
    """Parse a user-typed date.

    With the default ISO format the shape is checked first, so ``2023-7-1``
    is rejected even though ``strptime`` alone would accept it.
    """
    s = (text or "").strip()
    if fmt == ISO_ENTRY_FORMAT and not _ISO_ENTRY_RE.fullmatch(s):
        raise InvalidDateEntryError(s, fmt)
    try:
        return to_date(s, fmt)
    except ValueError as e:
        raise InvalidDateEntryError(s, fmt) from e


def month_end(start: date) -> date:
    """Last calendar day of ``start``'s month (leap years included)."""
    last_day = calendar.monthrange(start.year, start.month)[1]
    return start.replace(day=last_day)


def half_month_end(start: date) -> date:
    """End of the quinzaine containing ``start``.

    Days 1-15 end on the 15th; days 16 onward belong to the second half,
    which ends with the month.
    """
    if start.day <= QUINZAINE_DAY:
        return start.replace(day=QUINZAINE_DAY)
    return month_end(start)


def resolve_end_date(start: date, answer: str, fmt: str = ISO_ENTRY_FORMAT) -> date:
    token = (answer or "").strip()
    try:
        shortcut: Optional[EndDateShortcut] = EndDateShortcut(token)
    except ValueError:
        shortcut = None

    if shortcut is EndDateShortcut.QUINZAINE:
        if start.day > QUINZAINE_DAY:
            log.info("Start %s is in the second quinzaine; 'q' runs to month end", start)
        return half_month_end(start)
    if shortcut is EndDateShortcut.MONTH:
        return month_end(start)
    return parse_entry_date(token, fmt)


# endregion Date arithmetic

# region Prompts


def _parse_or_retry(
    provider: IInputProvider,
    prompt: str,
    parse: Callable[[str], date],
    echo: Callable[[str], None],
) -> date:
    while True:
        answer = provider.read_line(prompt)
        try:
            return parse(answer)
        except InvalidDateEntryError as e:
            log.debug("Rejected date entry: %s", e)
            echo(INVALID_DATE_MESSAGE)


def prompt_start_date(
    provider: IInputProvider,
    fmt: str = ISO_ENTRY_FORMAT,
    echo: Callable[[str], None] = print,
) -> date:
    return _parse_or_retry(
        provider, START_PROMPT, lambda s: parse_entry_date(s, fmt), echo
    )


def prompt_end_date(
    provider: IInputProvider,
    start: date,
    fmt: str = ISO_ENTRY_FORMAT,
    echo: Callable[[str], None] = print,
) -> date:
    return _parse_or_retry(
        provider, END_PROMPT, lambda s: resolve_end_date(start, s, fmt), echo
    )


def resolve_date_range(
    provider: IInputProvider,
    config: FeeTallyConfig,
    echo: Callable[[str], None] = print,
) -> DateRange:
    """Ask for a start date, then an end date or shortcut, and return the range.

    Raises
    ------
    EOFError
        If ``provider`` has no more input.
    """
    echo(START_HINT)
    start = prompt_start_date(provider, config.entry_date_format, echo)
    echo(END_HINT)
    end = prompt_end_date(provider, start, config.entry_date_format, echo)
    date_range = DateRange(start=start, end=end)
    if date_range.is_inverted:
        log.warning("End date %s is before start date %s; nothing will match", end, start)
    return date_range


# endregion Prompts
