import os
import sys

FALLBACK_COLUMNS = 80


def default_width(lower: int, upper: int) -> int:
    """Terminal column count clamped to [lower, upper], or 80 when stdout is not a tty."""
    columns = FALLBACK_COLUMNS
    if sys.stdout.isatty():
        columns = os.get_terminal_size().columns
    return max(lower, min(upper, columns))
