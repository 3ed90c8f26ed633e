from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pytest

from fee_tally.utilities.core_util import (
    from_dict,
    is_null_or_whitespace,
    open_for_read,
)


@dataclass(frozen=True)
class _Sample:
    name: str = "x"
    words: Tuple[str, ...] = ()
    flag: bool = False


@pytest.mark.parametrize("s,expected", [(None, True), ("", True), ("  \t", True), ("y", False)])
def test_is_null_or_whitespace(s, expected):
    assert is_null_or_whitespace(s) is expected


def test_from_dict_applies_defaults_and_tuples_lists():
    obj = from_dict(_Sample, {"words": ["a", "b"]})
    assert obj == _Sample(name="x", words=("a", "b"), flag=False)


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(KeyError) as ei:
        from_dict(_Sample, {"name": "n", "bogus": 1, "other": 2})
    assert "bogus" in str(ei.value) and "other" in str(ei.value)


def test_from_dict_requires_dataclass_and_str_keys():
    with pytest.raises(TypeError):
        from_dict(dict, {"a": 1})
    with pytest.raises(TypeError):
        from_dict(_Sample, {1: "x"})


def test_open_for_read_uses_builtins_open(monkeypatch, tmp_path):
    # Arrange
    opened = {"mode": None}

    class FakeReadable:
        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            pass

        def read(self, *_, **__):
            return "hello"

    def fake_open(file, mode="r", **kwargs):
        opened["mode"] = mode
        return FakeReadable()

    monkeypatch.setattr("builtins.open", fake_open, raising=True)

    # Act
    with open_for_read(tmp_path / "x.csv", binary=False) as f:
        data = f.read()

    # Assert
    assert opened["mode"] == "r"
    assert data == "hello"
