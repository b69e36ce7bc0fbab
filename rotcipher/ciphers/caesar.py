"""
Caesar Cipher
=============
Fixed-rotation substitution: every letter moves `rotation` places
along its own alphabet, wrapping at 26. Case is kept, everything that
is not an ASCII letter passes through untouched.

Rotation may be any integer. Python's % is a true modulo, so negative
and oversized rotations normalise to [0, 26) without extra handling.

Historical note: Suetonius records Julius Caesar shifting by three.
"""

import logging

from ..sequence import CharClass, TextSequence, classify

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26
BASES = {
    CharClass.UPPER: ord("A"),
    CharClass.LOWER: ord("a"),
}


def shift_char(char: str, shift: int) -> str:
    """Rotate one letter by `shift`; non-letters come back unchanged."""
    base = BASES.get(classify(char))
    if base is None:
        return char
    return chr((ord(char) - base + shift) % ALPHABET_SIZE + base)


def caesar_encode(sequence: TextSequence, rotation: int) -> None:
    logger.debug("caesar encode: %d chars, rotation %d", len(sequence), rotation)
    for i, ch in enumerate(sequence):
        sequence[i] = shift_char(ch, rotation)


def caesar_decode(sequence: TextSequence, rotation: int) -> None:
    logger.debug("caesar decode: %d chars, rotation %d", len(sequence), rotation)
    for i, ch in enumerate(sequence):
        sequence[i] = shift_char(ch, -rotation)


class CaesarCipher:
    """Caesar cipher over plain strings."""

    def __init__(self, rotation: int):
        if isinstance(rotation, bool) or not isinstance(rotation, int):
            raise TypeError("Caesar rotation must be an integer.")
        self._rotation = rotation

    @property
    def rotation(self) -> int:
        return self._rotation

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        seq = TextSequence.from_text(plaintext)
        caesar_encode(seq, self._rotation)
        return seq.render()

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        seq = TextSequence.from_text(ciphertext)
        caesar_decode(seq, self._rotation)
        return seq.render()
