from typing import Final
from typing import NamedTuple
from typing import final

from kayscan.scanner.source_location import Position
from kayscan.scanner.token_kinds import TokenKind

END_OF_FILE_TEXT: Final = "EOF"


@final
class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: Position

    @property
    def is_end_of_file(self) -> bool:
        return self.kind == TokenKind.END_OF_FILE

    def __str__(self) -> str:
        # Line-oriented textual form, e.g. `Operator ":="`.
        return f'{self.kind} "{self.text}"'
