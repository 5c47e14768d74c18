from enum import StrEnum
from typing import final


@final
class TokenKind(StrEnum):
    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    LITERAL = "Literal"
    OPERATOR = "Operator"
    SEPARATOR = "Separator"
    END_OF_FILE = "EndOfFile"
    UNRECOGNIZED = "Unrecognized"
