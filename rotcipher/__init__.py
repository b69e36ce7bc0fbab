"""
rotcipher — classical rotation ciphers
======================================
Caesar and Vigenère substitution over a mutable character sequence,
with an interactive command-line shell.

Modules:
    sequence          — TextSequence, character classification
    ciphers.caesar    — fixed-rotation cipher
    ciphers.vigenere  — repeating-key cipher
    engine            — cipher/action dispatch
    shell             — interactive and one-shot CLI

Pedagogical ciphers only. Neither offers any real secrecy.

License: Apache 2.0
"""

__version__ = "1.0.0"
__project__ = "rotcipher"

from .errors             import CipherError, InvalidKey, InvalidSelection
from .sequence           import CharClass, TextSequence, classify
from .ciphers.caesar     import CaesarCipher, caesar_encode, caesar_decode
from .ciphers.vigenere   import VigenereCipher, vigenere_encode, vigenere_decode
from .engine             import Action, Cipher, Result, apply

__all__ = [
    "CipherError",
    "InvalidKey",
    "InvalidSelection",
    "CharClass",
    "TextSequence",
    "classify",
    "CaesarCipher",
    "caesar_encode",
    "caesar_decode",
    "VigenereCipher",
    "vigenere_encode",
    "vigenere_decode",
    "Action",
    "Cipher",
    "Result",
    "apply",
]
