"""Prints the tokens of a KAY source file, one per line."""

import logging
import sys
from typing import Final
from typing import TextIO

from kayscan.config import Config
from kayscan.scanner.errors import ScannerIOError
from kayscan.scanner.scanner import Scanner

logger: Final = logging.getLogger(__name__)


def print_tokens(scanner: Scanner, output: TextIO) -> None:
    for token in scanner.tokenize():
        print(token, file=output)


def run(args: list[str], output: TextIO = sys.stdout) -> int:
    if len(args) != 1:
        print("Usage: kayscan <source file>", file=sys.stderr)
        return 2

    try:
        config: Final = Config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    logging.basicConfig(level=config.log_level)

    with Scanner.from_path(args[0], encoding=config.source_encoding) as scanner:
        try:
            print_tokens(scanner, output)
        except ScannerIOError as e:
            logger.error(f"Unable to scan '{args[0]}': {e.reason}")
            return 1
    return 0


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
