"""Character classification for the KAY language.

Only ASCII letters and digits are recognized; every other character is
either punctuation listed below or the start of an unrecognized run.
"""

from typing import Final
from typing import Optional

KEYWORDS: Final = frozenset({"if", "else", "while", "integer", "bool", "main"})

BOOLEAN_LITERALS: Final = frozenset({"True", "False"})

WHITESPACE_CHARACTERS: Final = frozenset(" \t\r\n\f")

END_OF_LINE_CHARACTERS: Final = frozenset("\r\n\f")

OPERATOR_START_CHARACTERS: Final = frozenset("+-*/%=<>!&|")

SEPARATOR_CHARACTERS: Final = frozenset("(){};,")

# Operators that may be followed by `=` to form a two-character operator.
EQUALS_EXTENSIBLE_OPERATORS: Final = frozenset("<>=!")

# Operators that are only valid when doubled (`&&`, `||`).
DOUBLED_ONLY_OPERATORS: Final = frozenset("&|")


def is_whitespace(char: Optional[str]) -> bool:
    return char is not None and char in WHITESPACE_CHARACTERS


def is_end_of_line(char: Optional[str]) -> bool:
    return char is not None and char in END_OF_LINE_CHARACTERS


def is_letter(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and char.isalpha()


def is_digit(char: Optional[str]) -> bool:
    return char is not None and char.isascii() and char.isdigit()


def is_operator_start(char: Optional[str]) -> bool:
    return char is not None and char in OPERATOR_START_CHARACTERS


def is_separator(char: Optional[str]) -> bool:
    return char is not None and char in SEPARATOR_CHARACTERS


def is_end_of_token(char: Optional[str]) -> bool:
    """Whether `char` terminates the token being assembled.

    `None` stands for the end of the input.
    """
    return char is None or is_whitespace(char) or is_operator_start(char) or is_separator(char)
