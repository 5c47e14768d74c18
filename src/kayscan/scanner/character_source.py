import codecs
from abc import ABC
from abc import abstractmethod
from collections import deque
from pathlib import Path
from typing import BinaryIO
from typing import Final
from typing import Optional
from typing import final
from typing import override

from kayscan.scanner.errors import ScannerIOError
from kayscan.scanner.errors import SourceNotFoundError
from kayscan.scanner.source_location import Position


class CharacterSource(ABC):
    """Produces the characters of a source text one at a time."""

    def __init__(self) -> None:
        self._position = Position.start()

    @property
    def position(self) -> Position:
        """Position of the next character `read_char()` will return."""
        return self._position

    def read_char(self) -> Optional[str]:
        """Returns the next character, or `None` once the source is exhausted."""
        char: Final = self._read_raw_char()
        if char is not None:
            self._position = self._position.advanced_by(char)
        return char

    @abstractmethod
    def _read_raw_char(self) -> Optional[str]: ...

    def close(self) -> None:
        return None


@final
class StringCharacterSource(CharacterSource):
    def __init__(self, text: str) -> None:
        super().__init__()
        self._text: Final = text
        self._offset = 0

    @override
    def _read_raw_char(self) -> Optional[str]:
        if self._offset >= len(self._text):
            return None
        char: Final = self._text[self._offset]
        self._offset += 1
        return char


@final
class FileCharacterSource(CharacterSource):
    """Decodes a byte stream one byte at a time, so failures point at the offending character."""

    def __init__(self, stream: BinaryIO, path: Optional[Path] = None, *, encoding: str = "utf-8") -> None:
        super().__init__()
        self._stream: Final = stream
        self._path: Final = path
        self._decoder: Final = codecs.getincrementaldecoder(encoding)()
        self._pending: Final[deque[str]] = deque()

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @override
    def _read_raw_char(self) -> Optional[str]:
        try:
            while not self._pending:
                byte = self._stream.read(1)
                if not byte:
                    # Flushes an incomplete multi-byte sequence at the end of the file.
                    self._pending.extend(self._decoder.decode(b"", final=True))
                    break
                self._pending.extend(self._decoder.decode(byte))
        except (OSError, UnicodeDecodeError) as e:
            raise ScannerIOError(self._path, self.position, e) from e
        return self._pending.popleft() if self._pending else None

    @override
    def close(self) -> None:
        self._stream.close()


def open_file_source(path: Path | str, *, encoding: str = "utf-8") -> FileCharacterSource:
    file_path: Final = Path(path)
    # Raises `LookupError` for an unknown encoding before anything is opened.
    codecs.lookup(encoding)
    try:
        # Binary mode keeps carriage returns visible to the scanner.
        stream: Final = file_path.open("rb")
    except OSError as e:
        raise SourceNotFoundError(file_path, e) from e
    return FileCharacterSource(stream, file_path, encoding=encoding)
