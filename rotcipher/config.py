from dataclasses import dataclass


@dataclass
class Config:
    """Runtime options for the shell, filled in from the command line."""

    # drop whitespace at the start of typed lines
    strip_leading_whitespace: bool = False

    prompt: str = " >> "

    # log engine activity to stderr
    verbose: bool = False
