from typing import NamedTuple
from typing import Self
from typing import final


@final
class Position(NamedTuple):
    """1-based line and column of a character in the source text."""

    line: int
    column: int

    @classmethod
    def start(cls) -> Self:
        return cls(line=1, column=1)

    def advanced_by(self, char: str) -> "Position":
        if char == "\n":
            return Position(line=self.line + 1, column=1)
        return Position(line=self.line, column=self.column + 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
