from __future__ import annotations

import sys
from typing import NoReturn

EXIT_PASSED = 0
EXIT_THRESHOLD_FAILED = 1
EXIT_ERROR = 2


def log(message: str) -> None:
    print(message, flush=True)


def fail(message: str) -> NoReturn:
    print(f"[ERROR] {message}", file=sys.stderr, flush=True)
    raise SystemExit(EXIT_ERROR)
