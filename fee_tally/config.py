# fee_tally/config.py
"""
Run configuration.

Everything that changes when the bank changes its export (header captions,
date formats, fee vocabulary) lives in ``FeeTallyConfig``. The defaults match
the Unibank "Relevé de transactions récentes" CSV download.
"""
from __future__ import annotations

import codecs
import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Tuple

from fee_tally.errors import ConfigError
from fee_tally.utilities.core_util import from_dict, open_for_read

log = logging.getLogger(__name__)

# If new words are added, include as many characters as possible to reduce ambiguity
DEFAULT_FEE_KEYWORDS: Tuple[str, ...] = (
    "commis.",
    "frais",
    "taxes",
    "timbre",
    "commissions",
)


@dataclass(frozen=True)
class FeeTallyConfig:
    date_header: str = "Date Trx"
    description_header: str = "Description"
    amount_header: str = "Debit"
    ledger_date_format: str = "%d-%b-%y"  # e.g. 05-Jul-23
    entry_date_format: str = "%Y-%m-%d"  # what the user types
    display_date_format: str = "%d %b %Y"
    fee_keywords: Tuple[str, ...] = DEFAULT_FEE_KEYWORDS
    delimiter: str = ","
    encoding: str = "utf-8-sig"
    verbose: bool = False

    def __post_init__(self) -> None:
        for name in (
            "date_header",
            "description_header",
            "amount_header",
            "ledger_date_format",
            "entry_date_format",
            "display_date_format",
            "encoding",
        ):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string")
        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ConfigError("delimiter must be a single character")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"unknown encoding {self.encoding!r}") from e
        if not isinstance(self.fee_keywords, tuple) or not all(
            isinstance(k, str) and k for k in self.fee_keywords
        ):
            raise ConfigError("fee_keywords must be a list of non-empty strings")
        if not isinstance(self.verbose, bool):
            raise ConfigError("verbose must be true or false")

    def with_overrides(self, **changes: Any) -> FeeTallyConfig:
        return replace(self, **changes)


def load_config(path: Path, base: FeeTallyConfig | None = None) -> FeeTallyConfig:
    """
    Read a JSON object of ``FeeTallyConfig`` field overrides.

    Fields absent from the file keep the value from ``base`` (or the defaults).
    """
    path = Path(path)
    try:
        with open_for_read(path, binary=False, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")

    try:
        overrides = from_dict(FeeTallyConfig, raw)
    except (KeyError, TypeError) as e:
        raise ConfigError(f"Config file {path}: {e}") from e

    base = base or FeeTallyConfig()
    merged = base.with_overrides(**{k: getattr(overrides, k) for k in raw})
    log.debug("Loaded config from %s: %s", path, merged)
    return merged
