#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
- Dataclass construction from plain mappings (used for JSON config files)
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import IO, Any, Literal, Mapping, Optional, TypeVar, overload

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False], **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


# endregion Common functions

# region from_dict

DC = TypeVar("DC")


def from_dict(target_type: type[DC], src: Mapping[str, Any], /) -> DC:
    """
    Build dataclass ``target_type`` from a string-keyed mapping.

    - Keys missing from ``src`` fall back to the dataclass defaults.
    - Keys that are not fields raise ``KeyError`` listing all of them.
    - Lists are turned into tuples so frozen dataclasses stay hashable.
    """
    if not is_dataclass(target_type):
        raise TypeError(f"Expected dataclass type, got {target_type!r}")
    if not isinstance(src, Mapping) or not all(isinstance(k, str) for k in src):
        raise TypeError(
            f"from_dict expects string-keyed mapping for {target_type.__name__}"
        )

    names = {f.name for f in fields(target_type)}
    unknown = sorted(k for k in src if k not in names)
    if unknown:
        raise KeyError(f"Unknown field(s) for {target_type.__name__}: {unknown}")

    kwargs: dict[str, Any] = {}
    for name, val in src.items():
        kwargs[name] = tuple(val) if isinstance(val, list) else val
    return target_type(**kwargs)


# endregion from_dict
