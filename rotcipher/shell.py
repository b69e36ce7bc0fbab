"""
rotcipher — command-line shell
==============================
Interactive menu loop around the cipher engine, plus a one-shot mode:

    rotcipher                                    # interactive
    rotcipher -c caesar -a encode -r 3 -t "Attack at Dawn"
    rotcipher -c v -a d -k lemon -t lxfopvefrnhr

The shell only gathers the selection, the message and the rotation or
key, then prints what the engine hands back.
"""

import argparse
import logging
import sys
from typing import TextIO

from . import __version__
from .config import Config
from .engine import Action, Cipher, apply
from .errors import CipherError, InvalidKey
from .sequence import TextSequence

logger = logging.getLogger(__name__)


class _LineInput:
    """Wraps a text stream and remembers when it ran dry."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self.eof = False

    def readline(self) -> str:
        line = self._stream.readline()
        if line == "":
            self.eof = True
        return line


class Shell:
    def __init__(self, config: Config = None, stdin: TextIO = None,
                 stdout: TextIO = None):
        self.config = config or Config()
        self.input = _LineInput(stdin if stdin is not None else sys.stdin)
        self.out = stdout if stdout is not None else sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self.out)

    def _ask(self) -> str:
        self.out.write(self.config.prompt)
        self.out.flush()
        line = self.input.readline()
        if self.input.eof:
            raise EOFError
        return line.strip()

    def _choose(self, question: str, options: dict) -> str:
        self.say()
        self.say(question)
        for code, label in options.items():
            self.say(f" {code}) {label}")
        while True:
            answer = self._ask().lower()[:1]
            if answer in options:
                return answer

    def _read_sequence(self, question: str) -> TextSequence:
        self.say()
        self.say(question)
        self.out.write(self.config.prompt)
        self.out.flush()
        seq = TextSequence().read_from_input(
            self.input, strip_leading=self.config.strip_leading_whitespace)
        if self.input.eof and not len(seq):
            raise EOFError
        return seq

    def _read_rotation(self) -> int:
        self.say()
        self.say("Enter a rotation:")
        while True:
            answer = self._ask()
            try:
                return int(answer)
            except ValueError:
                self.say(f"Rotation must be a whole number, got {answer!r}.")

    def welcome(self) -> None:
        self.say()
        self.say("Welcome")
        self.say()
        self.say("This program takes in a message and either encodes into or decodes from")
        self.say("a cipher of your choice.")

    def farewell(self) -> None:
        self.say()
        self.say("Thank you for using the program!")

    def wants_more(self) -> bool:
        return self._choose("Would you like to continue (y/n)?",
                            {"y": "Yes", "n": "No"}) == "y"

    def run_once(self) -> None:
        cipher = Cipher.parse(self._choose("Which cipher would you like to use?",
                                           {"c": "Caesar Cipher", "v": "Vigenere Cipher"}))
        action = Action.parse(self._choose("What would you like to do?",
                                           {"e": "Encode", "d": "Decode"}))
        message = self._read_sequence("Enter the message:")

        if cipher is Cipher.CAESAR:
            result = apply(cipher, action, message, rotation=self._read_rotation())
        else:
            while True:
                key = self._read_sequence("Enter the key:")
                try:
                    result = apply(cipher, action, message, key=key)
                    break
                except InvalidKey as e:
                    self.say(str(e))

        self.say()
        for line in result.lines():
            self.say(line)

    def run(self) -> int:
        self.welcome()
        try:
            while self.wants_more():
                self.run_once()
        except EOFError:
            logger.debug("input closed, ending session")
        except KeyboardInterrupt:
            self.say()
        self.farewell()
        return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotcipher",
        description="Encode or decode a message with a Caesar or Vigenère cipher.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--cipher", help="caesar (c) or vigenere (v)")
    parser.add_argument("-a", "--action", help="encode (e) or decode (d)")
    parser.add_argument("-r", "--rotation", type=int, help="Caesar rotation, any integer")
    parser.add_argument("-k", "--key", help="Vigenère key, must contain a letter")
    parser.add_argument("-t", "--text",
                        help="Message to transform; omit for the interactive shell")
    parser.add_argument("--strip-leading", action="store_true",
                        help="Drop leading whitespace from typed lines")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log engine activity to stderr")
    return parser


def run_one_shot(args, out: TextIO = None) -> int:
    out = out if out is not None else sys.stdout
    text = args.text.lstrip() if args.strip_leading else args.text
    try:
        result = apply(args.cipher or "", args.action or "", text,
                       rotation=args.rotation, key=args.key)
    except CipherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    for line in result.lines():
        print(line, file=out)
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = Config(strip_leading_whitespace=args.strip_leading, verbose=args.verbose)
    logging.basicConfig(level=logging.DEBUG if config.verbose else logging.WARNING,
                        stream=sys.stderr)

    if args.text is not None:
        return run_one_shot(args)
    return Shell(config).run()


if __name__ == "__main__":
    sys.exit(main())
