"""
Errors raised by the sequence and cipher layers.

All of them are recoverable: the caller decides whether to re-prompt
or give up on the single operation.
"""


class CipherError(Exception):
    """Base class for every error the engine reports."""


class InvalidKey(CipherError, ValueError):
    """Vigenère key holds no alphabetic character to shift with."""

    def __init__(self, key: str = ""):
        self.key = key
        super().__init__(f"Vigenère key {key!r} must contain at least one letter.")


class InvalidSelection(CipherError, ValueError):
    """Cipher or action outside the supported set, or a missing parameter."""
