"""
Console status helpers shared by the loader and the CLI.

Each helper prints a bracketed tag followed by the message. The tag is
coloured only when the target stream is a terminal, so redirected output
stays plain text.
"""

from __future__ import annotations

import sys
from typing import TextIO

_GREEN = "\033[0;32m"
_YELLOW = "\033[1;33m"
_RED = "\033[0;31m"
_RESET = "\033[0m"


def _tag(label: str, colour: str, stream: TextIO) -> str:
    isatty = getattr(stream, "isatty", None)
    if isatty is not None and isatty():
        return f"{colour}[{label}]{_RESET}"
    return f"[{label}]"


def print_status(msg: str) -> None:
    print(f"{_tag('INFO', _GREEN, sys.stdout)} {msg}", flush=True)


def print_warning(msg: str) -> None:
    print(f"{_tag('WARNING', _YELLOW, sys.stdout)} {msg}", flush=True)


def print_error(msg: str) -> None:
    print(f"{_tag('ERROR', _RED, sys.stderr)} {msg}", file=sys.stderr, flush=True)
