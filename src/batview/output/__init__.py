"""
Output package for batview.

This package contains the printer that writes framed, highlighted and
annotated file listings to a rich Console.
"""

from batview.output.printer import (
    PANEL_WIDTH,
    Printer,
    TerminalTooNarrowError,
    change_marker,
)

__all__ = [
    "PANEL_WIDTH",
    "Printer",
    "TerminalTooNarrowError",
    "change_marker",
]
