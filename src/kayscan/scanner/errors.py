from pathlib import Path
from typing import Final
from typing import Optional
from typing import final

from kayscan.scanner.source_location import Position


class ScannerError(RuntimeError): ...


@final
class SourceNotFoundError(ScannerError):
    def __init__(self, path: Path, reason: OSError) -> None:
        super().__init__(f"File not found: {path} ({reason.strerror or reason})")
        self.path: Final = path
        self.reason: Final = reason


@final
class ScannerIOError(ScannerError):
    def __init__(
        self,
        path: Optional[Path],
        position: Position,
        reason: OSError | UnicodeDecodeError,
    ) -> None:
        source_name: Final = "<input>" if path is None else str(path)
        super().__init__(f"Unable to read from {source_name} at {position}: {reason}")
        self.path: Final = path
        self.position: Final = position
        self.reason: Final = reason
