import sys
from typing import Any


_debug_trace = False


def set_debug_trace(b: bool):
    global _debug_trace
    _debug_trace = b


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def trace(format: str, *args: Any):
    if _debug_trace:
        printf_err("[trace] " + format + "\n", *args)
