"""
Interfaces and Enums for the fee tally data model.
"""

from .enum_end_date_shortcut import EndDateShortcut
from .i_input_provider import IInputProvider
from .i_to_dict import IToDict, RecursiveDictStr

__all__ = [
    "EndDateShortcut",
    "IInputProvider",
    "IToDict",
    "RecursiveDictStr",
]
