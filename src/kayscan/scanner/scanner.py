import logging
from collections.abc import Callable
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import Final
from typing import Optional
from typing import Self
from typing import final

from kayscan.scanner.character_classes import BOOLEAN_LITERALS
from kayscan.scanner.character_classes import DOUBLED_ONLY_OPERATORS
from kayscan.scanner.character_classes import EQUALS_EXTENSIBLE_OPERATORS
from kayscan.scanner.character_classes import KEYWORDS
from kayscan.scanner.character_classes import is_digit
from kayscan.scanner.character_classes import is_end_of_line
from kayscan.scanner.character_classes import is_end_of_token
from kayscan.scanner.character_classes import is_letter
from kayscan.scanner.character_classes import is_operator_start
from kayscan.scanner.character_classes import is_separator
from kayscan.scanner.character_classes import is_whitespace
from kayscan.scanner.character_source import CharacterSource
from kayscan.scanner.character_source import StringCharacterSource
from kayscan.scanner.character_source import open_file_source
from kayscan.scanner.errors import ScannerIOError
from kayscan.scanner.errors import SourceNotFoundError
from kayscan.scanner.source_location import Position
from kayscan.scanner.token import END_OF_FILE_TEXT
from kayscan.scanner.token import Token
from kayscan.scanner.token_kinds import TokenKind

logger: Final = logging.getLogger(__name__)


@final
class Scanner:
    """Turns the characters of a KAY source into tokens, one per `next_token()` call.

    The scanner reads exactly one character ahead of what it has committed to a
    token. Once the source is exhausted every call returns an EndOfFile token.
    A scanner instance must only be used by one consumer at a time.
    """

    def __init__(
        self,
        source: Optional[CharacterSource],
        *,
        open_error: Optional[SourceNotFoundError] = None,
    ) -> None:
        self._source: Final = source
        self._open_error: Final = open_error
        self._at_end = source is None
        # A blank that the first whitespace skip discards.
        self._lookahead: Optional[str] = None if source is None else " "
        self._lookahead_position = Position.start() if source is None else source.position

    @classmethod
    def from_path(cls, path: Path | str, *, encoding: str = "utf-8") -> Self:
        try:
            source: Final = open_file_source(path, encoding=encoding)
        except SourceNotFoundError as e:
            logger.warning(f"File not found: {path}")
            return cls(None, open_error=e)
        logger.debug(f"Opened '{path}' for scanning.")
        return cls(source)

    @classmethod
    def from_string(cls, text: str) -> Self:
        return cls(StringCharacterSource(text))

    @property
    def at_end(self) -> bool:
        return self._at_end

    @property
    def open_error(self) -> Optional[SourceNotFoundError]:
        """The reason nothing could be scanned, if the source failed to open."""
        return self._open_error

    def next_token(self) -> Token:
        while True:
            self._skip_whitespace()
            if self._at_end or self._lookahead is None:
                return Token(TokenKind.END_OF_FILE, END_OF_FILE_TEXT, self._lookahead_position)

            start = self._lookahead_position
            char = self._lookahead

            if char == "/":
                self._advance()
                if self._lookahead == "/":
                    self._skip_rest_of_line()
                    continue
                return Token(TokenKind.OPERATOR, "/", start)

            if char == ":":
                self._advance()
                if self._lookahead == "=":
                    self._advance()
                    return Token(TokenKind.OPERATOR, ":=", start)
                return Token(TokenKind.OPERATOR, ":", start)

            if is_operator_start(char):
                return self._scan_operator(char, start)

            if is_separator(char):
                self._advance()
                return Token(TokenKind.SEPARATOR, char, start)

            if is_letter(char):
                word = self._consume_while(lambda c: is_letter(c) or is_digit(c))
                if word in KEYWORDS:
                    return Token(TokenKind.KEYWORD, word, start)
                if word in BOOLEAN_LITERALS:
                    return Token(TokenKind.LITERAL, word, start)
                return Token(TokenKind.IDENTIFIER, word, start)

            if is_digit(char):
                return Token(TokenKind.LITERAL, self._consume_while(is_digit), start)

            # The first character is taken unconditionally, even if it would end a token.
            self._advance()
            rest = self._consume_while(lambda c: not is_end_of_token(c))
            return Token(TokenKind.UNRECOGNIZED, char + rest, start)

    def tokenize(self) -> list[Token]:
        tokens: Final[list[Token]] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.is_end_of_file:
                return tokens

    def __iter__(self) -> Iterator[Token]:
        while not (token := self.next_token()).is_end_of_file:
            yield token

    def close(self) -> None:
        if self._source is not None:
            self._source.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def _scan_operator(self, char: str, start: Position) -> Token:
        self._advance()
        if char in EQUALS_EXTENSIBLE_OPERATORS:
            if self._lookahead == "=":
                self._advance()
                return Token(TokenKind.OPERATOR, char + "=", start)
            return Token(TokenKind.OPERATOR, char, start)
        if char in DOUBLED_ONLY_OPERATORS:
            if self._lookahead == char:
                self._advance()
                return Token(TokenKind.OPERATOR, char * 2, start)
            # A lone `&` or `|` is not an operator of the language.
            return Token(TokenKind.UNRECOGNIZED, char, start)
        return Token(TokenKind.OPERATOR, char, start)

    def _consume_while(self, predicate: Callable[[Optional[str]], bool]) -> str:
        chars: Final[list[str]] = []
        while not self._at_end and self._lookahead is not None and predicate(self._lookahead):
            chars.append(self._lookahead)
            self._advance()
        return "".join(chars)

    def _skip_whitespace(self) -> None:
        while not self._at_end and is_whitespace(self._lookahead):
            self._advance()

    def _skip_rest_of_line(self) -> None:
        while not self._at_end and not is_end_of_line(self._lookahead):
            self._advance()

    def _advance(self) -> None:
        if self._at_end or self._source is None:
            self._lookahead = None
            return
        position: Final = self._source.position
        try:
            char: Final = self._source.read_char()
        except ScannerIOError as e:
            logger.error(f"Scanning stopped: {e}")
            self._at_end = True
            self._lookahead = None
            self._lookahead_position = position
            raise
        self._lookahead = char
        self._lookahead_position = position
        if char is None:
            logger.debug(f"Reached end of input at {position}.")
            self._at_end = True
