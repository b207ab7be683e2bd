import os
import sys

FALLBACK_SIZE = (80, 24)


def get_terminal_size() -> tuple[int, int]:
    """Return (columns, rows) of the terminal, or (80, 24) if not a tty."""
    if not sys.stdout.isatty():
        return FALLBACK_SIZE
    try:
        size = os.get_terminal_size()
    except OSError:
        return FALLBACK_SIZE
    return (size.columns, size.lines)
