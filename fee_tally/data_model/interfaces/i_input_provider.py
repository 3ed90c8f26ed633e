# fee_tally/data_model/interfaces/i_input_provider.py
"""
Runtime-checkable protocol for a source of interactive answers.

The date prompts never call ``input()`` directly; they ask an
``IInputProvider`` for one line at a time. The console implementation blocks
on the terminal, a scripted implementation replays a fixed list of answers.

Implementations must:

- return the line without its trailing newline;
- raise ``EOFError`` when no further input will ever arrive, so retry loops
  terminate instead of spinning.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IInputProvider(Protocol):
    def read_line(self, prompt: str) -> str: ...
