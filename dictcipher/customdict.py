"""An ordered dictionary of typed value lists with CSV loading."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Union

__all__ = [
    "ValueType",
    "Item",
    "CustomDict",
    "parse_value",
    "format_value",
]

Value = Union[int, float, str]

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_ATOF = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:inf(?:inity)?|nan|"
    r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))",
    re.IGNORECASE,
)
_HEAD_FIELD = re.compile(r"[^, ]+")
_VALUE_FIELD = re.compile(r"[^,]+")


class ValueType(str, Enum):
    """The type shared by all values stored under one key."""

    INT = "i"
    FLOAT = "f"
    DOUBLE = "d"
    CHAR = "c"


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _atof(text: str) -> float:
    match = _ATOF.match(text)
    return float(match.group(1)) if match else 0.0


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def parse_value(text: str, value_type: Union[ValueType, str]) -> Value:
    """Convert the leading part of ``text`` to a value of ``value_type``.

    Numbers are read like ``atoi``/``atof``: leading whitespace is skipped and
    text that does not start with a number gives zero. A char takes the first
    character of the text.
    """
    kind = ValueType(value_type)
    if kind is ValueType.INT:
        return _atoi(text)
    if kind is ValueType.FLOAT:
        return _to_float32(_atof(text))
    if kind is ValueType.DOUBLE:
        return _atof(text)
    return text[0] if text else "\0"


def format_value(value: Value, value_type: Union[ValueType, str]) -> str:
    """Render one value the way the dictionary prints it."""
    kind = ValueType(value_type)
    if kind is ValueType.INT:
        return f"{int(value):d}"
    if kind in (ValueType.FLOAT, ValueType.DOUBLE):
        return f"{float(value):.2f}"
    return str(value)


@dataclass
class Item:
    """A key with its list of values and their type."""

    key: str
    values: list = field(default_factory=list)
    value_type: ValueType = ValueType.INT

    def format_values(self) -> str:
        """Return the values, each followed by a single space."""
        return "".join(f"{format_value(value, self.value_type)} " for value in self.values)


class CustomDict:
    """A dictionary keeping its items in insertion order, with merge-on-add."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    def __contains__(self, key: object) -> bool:
        return any(item.key == key for item in self._items)

    def _lookup(self, key: str) -> Item | None:
        return next((item for item in self._items if item.key == key), None)

    def add_item(self, key: str, values: Iterable[Value], value_type: Union[ValueType, str]) -> None:
        """Add ``values`` under ``key``; an existing key gets them appended."""
        kind = ValueType(value_type)
        existing = self._lookup(key)
        if existing is not None:
            existing.values.extend(values)
            return
        self._items.append(Item(key, list(values), kind))

    def delete_item(self, key: str) -> None:
        """Remove ``key``; the last item takes its place. Missing keys are ignored."""
        for index, item in enumerate(self._items):
            if item.key == key:
                last = self._items.pop()
                if index < len(self._items):
                    self._items[index] = last
                return

    def set_value(self, key: str, values: Iterable[Value], value_type: Union[ValueType, str]) -> None:
        """Replace whatever is stored under ``key``."""
        self.delete_item(key)
        self.add_item(key, values, value_type)

    def search_item(self, key: str) -> list | None:
        """Return the values stored under ``key``, or None."""
        item = self._lookup(key)
        return item.values if item is not None else None

    def find_index(self, key: str) -> int:
        """Return the position of ``key``; raise KeyError if it is absent."""
        for index, item in enumerate(self._items):
            if item.key == key:
                return index
        raise KeyError(key)

    def sort(self) -> None:
        """Order the items by key."""
        self._items.sort(key=lambda item: item.key)

    def format_lines(self) -> list[str]:
        """Return one printable line per item."""
        return [f"Key: {item.key}, Values: {item.format_values()}" for item in self._items]

    def read_csv(self, path: Union[str, Path]) -> None:
        """Load ``type, key, value, value, ...`` lines from ``path``.

        Char lists get a terminating ``"\\0"`` value. Raises OSError if the
        file cannot be opened and ValueError for a line without a key or with
        an unknown type.
        """
        with open(path, encoding="utf-8") as handle:
            for line_number, line in enumerate(handle, start=1):
                if not line.strip():
                    continue
                self._read_line(line, line_number)

    def _read_line(self, line: str, line_number: int) -> None:
        type_match = _HEAD_FIELD.search(line)
        if type_match is None:
            raise ValueError(f"line {line_number}: missing type")
        try:
            kind = ValueType(type_match.group()[0])
        except ValueError:
            raise ValueError(f"line {line_number}: unknown type {type_match.group()[0]!r}") from None
        name_match = _HEAD_FIELD.search(line, type_match.end() + 1)
        if name_match is None:
            raise ValueError(f"line {line_number}: missing key")
        fields = (match.group() for match in _VALUE_FIELD.finditer(line, name_match.end() + 1))
        if kind is ValueType.CHAR:
            values: list = [text[1] if len(text) > 1 else "\0" for text in fields]
            values.append("\0")
        else:
            values = [parse_value(text, kind) for text in fields]
        self.add_item(name_match.group(), values, kind)