"""
Text Sequence
=============
Ordered, mutable run of single characters.

Built one character at a time from input, mutated in place by exactly
one cipher transform, rendered for display, then dropped. Length and
order never change once built; transforms only overwrite cells.
"""

import sys
from enum import Enum
from typing import Callable, Iterator, TextIO


class CharClass(Enum):
    UPPER = "u"
    LOWER = "l"
    OTHER = "n"


def classify(char: str) -> CharClass:
    """ASCII letters only: anything outside A-Z / a-z is OTHER."""
    if "A" <= char <= "Z":
        return CharClass.UPPER
    if "a" <= char <= "z":
        return CharClass.LOWER
    return CharClass.OTHER


def is_letter(char: str) -> bool:
    return classify(char) is not CharClass.OTHER


class TextSequence:
    """
    Growable character container the cipher engine operates on.

    Supports forward traversal, indexing and in-place assignment of
    single characters. There is no terminator cell; len() is the end.
    """

    def __init__(self):
        self._cells = []

    @classmethod
    def from_text(cls, text: str) -> "TextSequence":
        seq = cls()
        for ch in text:
            seq.append(ch)
        return seq

    def append(self, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}.")
        self._cells.append(char)

    def read_from_input(self, stream: TextIO = None,
                        strip_leading: bool = False) -> "TextSequence":
        """
        Append one line of input, without its line ending.

        End of input ends the read exactly like a newline does. With
        strip_leading, whitespace at the start of the line is skipped.
        """
        if stream is None:
            stream = sys.stdin
        line = stream.readline()
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        if strip_leading:
            line = line.lstrip()
        for ch in line:
            self.append(ch)
        return self

    def for_each(self, visitor: Callable[[str], None]) -> None:
        for ch in self._cells:
            visitor(ch)

    def to_lowercase(self) -> None:
        for i, ch in enumerate(self._cells):
            if classify(ch) is CharClass.UPPER:
                self._cells[i] = ch.lower()

    def has_letters(self) -> bool:
        return any(is_letter(ch) for ch in self._cells)

    def copy(self) -> "TextSequence":
        seq = TextSequence()
        seq._cells = list(self._cells)
        return seq

    def render(self) -> str:
        return "".join(self._cells)

    def destroy(self) -> None:
        self._cells.clear()

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> str:
        return self._cells[index]

    def __setitem__(self, index: int, char: str) -> None:
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}.")
        self._cells[index] = char

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TextSequence({self.render()!r})"
