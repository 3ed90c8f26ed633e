# fee_tally/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Final


def to_decimal(value: Any) -> Decimal:
    """
    Convert a plain decimal number to ``Decimal``.

    Accepted strings look like ``"100.00"``, ``"-5.50"``, ``"+2"``, ``"1e3"``
    (anything Python's ``float`` would take, minus the non-finite spellings).
    Thousands separators, currency symbols and parentheses are NOT accepted:
    a ledger amount in such a shape means the export format changed.

    Raises:
        ValueError: if the value is empty, not numeric, or not finite.

    Examples:
        to_decimal("-5.50")   -> Decimal('-5.50')
        to_decimal(" 100 ")   -> Decimal('100')
        to_decimal("1,234")   -> ValueError
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValueError("Unsupported type for Decimal conversion: bool")
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # Avoid binary float artifacts
        result = Decimal(str(value))
    elif isinstance(value, str):
        s = value.strip().replace(_UNICODE_MINUS, "-")
        if not _PLAIN_NUMBER_RE.fullmatch(s):
            raise ValueError(f"Could not parse Decimal from {value!r}")
        try:
            result = Decimal(s)
        except InvalidOperation as e:
            raise ValueError(f"Could not parse Decimal from {value!r}") from e
    else:
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    if not result.is_finite():
        raise ValueError(f"Non-finite amount {value!r}")
    return result


def to_date(s: str, fmt: str, /, *, strict: bool = False) -> date:
    """
    Parse ``s`` with the ``strptime`` format ``fmt`` and drop any time part.

    ``%b`` month abbreviations follow the C locale (``Jan`` .. ``Dec``).
    With ``strict`` the text must also be exactly what ``fmt`` would print
    (month names compared case-insensitively), so ``5-Jul-23`` or
    `` 05-Jul-23`` do not pass for ``%d-%b-%y``.

    Raises:
        ValueError: if ``s`` does not match ``fmt``.
    """
    if not isinstance(s, str):
        raise ValueError(f"Cannot convert {type(s).__name__} to date")
    parsed = datetime.strptime(s, fmt)
    if strict and parsed.strftime(fmt).lower() != s.lower():
        raise ValueError(f"{s!r} does not have the exact shape of {fmt!r}")
    return parsed.date()


def format_amount(value: Decimal) -> str:
    """Render an amount with exactly two decimals (``-2`` -> ``"-2.00"``)."""
    return f"{value:.2f}"


_PLAIN_NUMBER_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?"
)
_UNICODE_MINUS = "\u2212"  # '−'
