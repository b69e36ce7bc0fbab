"""
Engine dispatch
===============
Routes a (cipher, action) selection to the matching transform.

apply() works on a copy of the message, so the caller's text is never
left half-transformed when a selection or key turns out to be bad.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .ciphers.caesar import caesar_decode, caesar_encode
from .ciphers.vigenere import vigenere_decode, vigenere_encode
from .errors import InvalidSelection
from .sequence import TextSequence

logger = logging.getLogger(__name__)


class _Choice(Enum):
    @classmethod
    def parse(cls, value):
        """Accept a member, its one-letter code or its name, any case."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text in (member.value, member.name.lower()):
                    return member
        raise InvalidSelection(f"Unknown {cls.__name__.lower()}: {value!r}")


class Cipher(_Choice):
    CAESAR   = "c"
    VIGENERE = "v"


class Action(_Choice):
    ENCODE = "e"
    DECODE = "d"


_TRANSFORMS = {
    (Cipher.CAESAR,   Action.ENCODE): caesar_encode,
    (Cipher.CAESAR,   Action.DECODE): caesar_decode,
    (Cipher.VIGENERE, Action.ENCODE): vigenere_encode,
    (Cipher.VIGENERE, Action.DECODE): vigenere_decode,
}


@dataclass
class Result:
    cipher: Cipher
    action: Action
    original: str
    transformed: str
    rotation: Optional[int] = None
    key: Optional[str] = None

    def lines(self) -> List[str]:
        if self.action is Action.ENCODE:
            labels = ("Plaintext:  ", "Ciphertext: ")
        else:
            labels = ("Ciphertext: ", "Plaintext:  ")
        out = [labels[0] + self.original, labels[1] + self.transformed]
        if self.cipher is Cipher.CAESAR:
            out.append(f"Rotation:   {self.rotation}")
        else:
            out.append(f"Key:        {self.key}")
        return out


def apply(cipher, action, message: Union[str, TextSequence],
          rotation: Optional[int] = None,
          key: Union[str, TextSequence, None] = None) -> Result:
    """
    Run one cipher operation and return original and transformed text.

    Raises InvalidSelection for an unknown cipher/action or a missing
    rotation/key, and InvalidKey for a Vigenère key without letters.
    """
    cipher = Cipher.parse(cipher)
    action = Action.parse(action)

    if isinstance(message, TextSequence):
        seq = message.copy()
    else:
        seq = TextSequence.from_text(message)
    original = seq.render()

    transform = _TRANSFORMS[(cipher, action)]
    logger.debug("apply %s/%s to %d chars", cipher.name, action.name, len(seq))

    if cipher is Cipher.CAESAR:
        if rotation is None or isinstance(rotation, bool) or not isinstance(rotation, int):
            raise InvalidSelection("Caesar cipher needs an integer rotation.")
        transform(seq, rotation)
        return Result(cipher, action, original, seq.render(), rotation=rotation)

    if key is None:
        raise InvalidSelection("Vigenère cipher needs a key.")
    if isinstance(key, TextSequence):
        key_seq = key.copy()
    else:
        key_seq = TextSequence.from_text(key)
    transform(seq, key_seq)
    return Result(cipher, action, original, seq.render(), key=key_seq.render())
