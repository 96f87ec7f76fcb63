"""Interactive menu for editing a CustomDict from a text stream."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from dictcipher.customdict import CustomDict, Item, ValueType, parse_value

__all__ = ["run_menu", "main"]

_MENU = (
    "\nMenu:\n"
    "1. Add item\n"
    "2. Delete item\n"
    "3. Set value\n"
    "4. Search item\n"
    "5. Sort dictionary\n"
    "6. Print dictionary\n"
    "7. Read CSV file\n"
    "8. Exit\n"
    "Enter your choice: "
)
_TYPE_PROMPT = "Enter type (i: int, f: float, d: double, c: char): "
_VALUES_PROMPT = "Enter values (enter 'e' to stop): "
_STOP_WORD = "e"


class _EndOfInput(Exception):
    """The input stream ran out in the middle of a request."""


class _Scanner:
    """Reads whitespace-separated words and single characters from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _next_non_space(self) -> str:
        while True:
            char = self._stream.read(1)
            if not char:
                raise _EndOfInput
            if not char.isspace():
                return char

    def char(self) -> str:
        """Return the next character that is not whitespace."""
        return self._next_non_space()

    def word(self) -> str:
        """Return the next run of characters up to whitespace."""
        chars = [self._next_non_space()]
        while True:
            char = self._stream.read(1)
            if not char or char.isspace():
                return "".join(chars)
            chars.append(char)


class _Menu:
    def __init__(self, dictionary: CustomDict, scanner: _Scanner, out: TextIO) -> None:
        self.dictionary = dictionary
        self.scanner = scanner
        self.out = out

    def _read_entry(self) -> tuple[str, ValueType | None, list]:
        self.out.write("Enter key: ")
        key = self.scanner.word()
        self.out.write(_TYPE_PROMPT)
        type_char = self.scanner.char()
        self.out.write(_VALUES_PROMPT)
        words = []
        while (word := self.scanner.word()) != _STOP_WORD:
            words.append(word)
        try:
            kind = ValueType(type_char)
        except ValueError:
            self.out.write("Invalid type.\n")
            return key, None, []
        return key, kind, [parse_value(word, kind) for word in words]

    def add(self) -> None:
        key, kind, values = self._read_entry()
        if kind is not None:
            self.dictionary.add_item(key, values, kind)

    def set(self) -> None:
        key, kind, values = self._read_entry()
        if kind is not None:
            self.dictionary.set_value(key, values, kind)

    def delete(self) -> None:
        self.out.write("Enter key to delete: ")
        self.dictionary.delete_item(self.scanner.word())

    def search(self) -> None:
        self.out.write("Enter key to search: ")
        key = self.scanner.word()
        values = self.dictionary.search_item(key)
        if values is None:
            self.out.write("Item not found.\n")
            return
        item = next(entry for entry in self.dictionary if entry.key == key)
        shown = Item(key, values, item.value_type)
        self.out.write(f"{key}\nValues: {shown.format_values()}\n")

    def sort(self) -> None:
        self.dictionary.sort()
        self.out.write("Dictionary sorted.\n")

    def show(self) -> None:
        for line in self.dictionary.format_lines():
            self.out.write(line + "\n")

    def read_csv(self) -> None:
        self.out.write("Enter CSV filename: ")
        filename = self.scanner.word()
        try:
            self.dictionary.read_csv(filename)
        except (OSError, ValueError):
            self.out.write("Failed to read file.\n")
        else:
            self.out.write("CSV file read.\n")


def run_menu(dictionary: CustomDict, stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu loop on ``dictionary`` until Exit is chosen or input ends."""
    menu = _Menu(dictionary, _Scanner(stdin), stdout)
    actions = {
        "1": menu.add,
        "2": menu.delete,
        "3": menu.set,
        "4": menu.search,
        "5": menu.sort,
        "6": menu.show,
        "7": menu.read_csv,
    }
    try:
        while True:
            stdout.write(_MENU)
            choice = menu.scanner.char()
            if choice == "8":
                stdout.write("Exiting...")
                return
            action = actions.get(choice)
            if action is None:
                stdout.write("Invalid choice. Please try again.\n")
            else:
                action()
    except _EndOfInput:
        return
    finally:
        stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive dictionary menu on standard input and output."""
    argparse.ArgumentParser(description="Edit a typed dictionary through a text menu.").parse_args(argv)
    run_menu(CustomDict(), sys.stdin, sys.stdout)
    return 0