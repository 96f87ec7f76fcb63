"""A shift-by-five substitution cipher that replaces comments with their length."""

from __future__ import annotations

import argparse
import sys
from typing import Iterator, Sequence

__all__ = ["ALPHABET", "KEY", "encrypt", "decrypt", "encrypt_main", "decrypt_main"]

ALPHABET = "abcdefghijklmnopqrstuvwxyz(<=+)[*/]{>!-}?\\&|%_;\"#.'0123456789"
KEY = 5

_INDEX = {char: index for index, char in enumerate(ALPHABET)}
_COMMENT_HEADER = "/*There are: "
_COMMENT_FOOTER = " characters as comment.*/\n"


def _shift(char: str, offset: int) -> str:
    return ALPHABET[(_INDEX[char] + offset) % len(ALPHABET)]


def _encode_count(count: int) -> str:
    if 9 < count <= 99:
        tens, ones = divmod(count, 10)
        digits = [tens] if ones == 5 else [tens, ones]
    elif 0 <= count <= 9:
        digits = [count]
    else:
        digits = []
    return "".join(_shift(str(digit), KEY) for digit in digits)


def _read_comment(chars: Iterator[str], last: str) -> tuple[str, str | None]:
    """Consume a comment body; return the last char read and the marker, if closed."""
    count = 0
    for char in chars:
        last = char
        if char == "*":
            closing = next(chars, None)
            if closing is None:
                break
            last = closing
            if closing == "/":
                return last, "@ " + _encode_count(count)
        elif char != " ":
            count += 1
    return last, None


def encrypt(text: str) -> str:
    """Encrypt ``text``; each ``/* ... */`` becomes ``@ `` and its encrypted length."""
    out: list[str] = []
    chars = iter(text)
    for char in chars:
        if char == "/":
            char = next(chars, char)
            if char == "*":
                char, marker = _read_comment(chars, char)
                if marker is not None:
                    out.append(marker)
            elif char in " \t":
                out.append("-" + char)
            elif char in _INDEX:
                out.append("-" + _shift(char, KEY))
        elif char in " \t":
            out.append(char)
        elif char in _INDEX:
            out.append(_shift(char, KEY))
        if char == "\n":
            out.append("\n")
    return "".join(out)


def decrypt(text: str) -> str:
    """Decrypt ``text``; an ``@`` line becomes a comment stating the length."""
    out: list[str] = []
    chars = iter(text)
    for char in chars:
        if char == "@":
            out.append(_COMMENT_HEADER)
            next(chars, None)
            for char in chars:
                if char == "\n":
                    break
                if char in _INDEX:
                    out.append(_shift(char, -KEY))
            out.append(_COMMENT_FOOTER)
        elif char in "\n \t":
            out.append(char)
        elif char in _INDEX:
            out.append(_shift(char, -KEY))
    return "".join(out)


def _run(transform, description: str, argv: Sequence[str] | None) -> int:
    argparse.ArgumentParser(description=description).parse_args(argv)
    data = sys.stdin.buffer.read().decode("latin-1")
    sys.stdout.write(transform(data))
    sys.stdout.flush()
    return 0


def encrypt_main(argv: Sequence[str] | None = None) -> int:
    """Encrypt standard input to standard output."""
    return _run(encrypt, "Encrypt standard input to standard output.", argv)


def decrypt_main(argv: Sequence[str] | None = None) -> int:
    """Decrypt standard input to standard output."""
    return _run(decrypt, "Decrypt standard input to standard output.", argv)