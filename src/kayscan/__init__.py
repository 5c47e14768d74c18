import subprocess
import sys
from typing import Final

# Development shortcuts, installed as console scripts.


def _run_poe_task(task: str) -> None:
    result: Final = subprocess.run(["poe", task])
    sys.exit(result.returncode)


def check() -> None:
    _run_poe_task("check")


def fix() -> None:
    _run_poe_task("fix")


def test() -> None:
    _run_poe_task("test")
