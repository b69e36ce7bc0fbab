"""
Vigenère Polyalphabetic Cipher
==============================
Each message letter is shifted by the current key letter
(a=0 ... z=25). The key cursor cycles over the key's letters only,
skipping anything else in the key, and wraps after the last one.

Non-letters in the message pass through and do not consume a key
letter, so "attack at dawn" and "attackatdawn" line up with the key
the same way. Case of the message is preserved.

A key must hold at least one letter. That is checked once, before the
message is touched, so a bad key leaves the message exactly as it was.

Historical note: Giovan Battista Bellaso, 1553; later attributed to
Blaise de Vigenère. "Le chiffre indéchiffrable" until Kasiski (1863).
"""

import logging
from typing import Iterator, List

from ..errors import InvalidKey
from ..sequence import TextSequence, is_letter
from .caesar import shift_char

logger = logging.getLogger(__name__)


def _key_shifts(key: TextSequence) -> List[int]:
    """
    Lowercase the key in place and return its letter shifts in order.
    Raises InvalidKey when there is no letter to shift with.
    """
    if not key.has_letters():
        raise InvalidKey(key.render())
    key.to_lowercase()
    return [ord(ch) - ord("a") for ch in key if is_letter(ch)]


def _cycle(shifts: List[int]) -> Iterator[int]:
    while True:
        yield from shifts


def _transform(sequence: TextSequence, key: TextSequence, sign: int) -> None:
    shifts = _key_shifts(key)
    cursor = _cycle(shifts)
    for i, ch in enumerate(sequence):
        # only letters advance the key cursor
        if is_letter(ch):
            sequence[i] = shift_char(ch, sign * next(cursor))


def vigenere_encode(sequence: TextSequence, key: TextSequence) -> None:
    logger.debug("vigenere encode: %d chars, key length %d", len(sequence), len(key))
    _transform(sequence, key, 1)


def vigenere_decode(sequence: TextSequence, key: TextSequence) -> None:
    logger.debug("vigenere decode: %d chars, key length %d", len(sequence), len(key))
    _transform(sequence, key, -1)


class VigenereCipher:
    """
    Vigenère cipher over plain strings.

    The key is validated and case-folded here, so a cipher that
    constructs successfully can always encrypt and decrypt.
    """

    def __init__(self, key: str):
        seq = TextSequence.from_text(key or "")
        _key_shifts(seq)
        self._key = seq.render()

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        seq = TextSequence.from_text(plaintext)
        vigenere_encode(seq, TextSequence.from_text(self._key))
        return seq.render()

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        seq = TextSequence.from_text(ciphertext)
        vigenere_decode(seq, TextSequence.from_text(self._key))
        return seq.render()
