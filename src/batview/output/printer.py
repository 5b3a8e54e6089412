"""
Framed, annotated file output.

Each file is printed as a grid: a fixed-width side panel holding the line
number and change marker, a vertical rule, and the highlighted line text.
"""

from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.style import Style
from rich.text import Text

from batview.highlighting import HighlightingAssets, Spans
from batview.models.changes import LineChange, LineChanges

PANEL_WIDTH = 7

GRID_STYLE = Style(color="color(238)")
LINE_NUMBER_STYLE = Style(color="color(244)")
HEADER_STYLE = Style(color="white", bold=True)

HORIZONTAL_RULE = "─"
VERTICAL_RULE = "│"

_CHANGE_MARKERS: dict[LineChange, tuple[str, Style]] = {
    LineChange.ADDED: ("+", Style(color="green")),
    LineChange.REMOVED_ABOVE: ("‾", Style(color="red")),
    LineChange.REMOVED_BELOW: ("_", Style(color="red")),
    LineChange.MODIFIED: ("~", Style(color="yellow")),
}
_NO_CHANGE_MARKER = (" ", Style())


class TerminalTooNarrowError(ValueError):
    """The output is too narrow to fit the side panel and the grid."""
    pass


def change_marker(change: Optional[LineChange]) -> tuple[str, Style]:
    """Get the glyph and style shown in the panel for a line change."""
    if change is None:
        return _NO_CHANGE_MARKER
    return _CHANGE_MARKERS[change]


class Printer:
    """
    Print files as framed, highlighted and annotated listings.

    The console decides where output goes and how wide it is; the assets
    are shared between files while every file gets its own highlighter.
    """

    def __init__(self, console: Console, assets: HighlightingAssets) -> None:
        """
        Initialize the printer.

        Args:
            console: Console to write to. Its width bounds the grid.
            assets: Theme data used to highlight every file.
        """
        self.console = console
        self.assets = assets

    @property
    def term_width(self) -> int:
        """The output width, validated against the side panel."""
        width = self.console.width
        if width <= PANEL_WIDTH + 1:
            raise TerminalTooNarrowError(
                f"terminal too narrow: {width} columns, need at least {PANEL_WIDTH + 2}"
            )
        return width

    def _print(self, row: Text) -> None:
        self.console.print(row, soft_wrap=True)

    def horizontal_line(self, junction: str, term_width: int) -> Text:
        """Build a frame line with the junction glyph above the vertical rule."""
        bar = HORIZONTAL_RULE * (term_width - (PANEL_WIDTH + 1))
        return Text(f"{HORIZONTAL_RULE * PANEL_WIDTH}{junction}{bar}", style=GRID_STYLE)

    def header(self, path: Union[str, Path]) -> Text:
        return Text.assemble(
            " " * PANEL_WIDTH,
            (VERTICAL_RULE, GRID_STYLE),
            " ",
            (str(path), HEADER_STYLE),
        )

    def row(self, line_number: int, change: Optional[LineChange], spans: Spans) -> Text:
        """Build the output row for one line of the file."""
        row = Text.assemble(
            (f"{line_number:4}", LINE_NUMBER_STYLE),
            " ",
            change_marker(change),
            " ",
            (VERTICAL_RULE, GRID_STYLE),
            " ",
        )
        for text, style in spans:
            row.append(text, style)
        return row

    def print_file(
        self,
        path: Union[str, Path],
        line_changes: Optional[LineChanges] = None,
    ) -> None:
        """
        Print one file.

        Lines are read, highlighted and written one at a time.

        Args:
            path: File to print. Shown in the header exactly as given.
            line_changes: Line annotations, or None to show no markers.

        Raises:
            TerminalTooNarrowError: If the console cannot fit the grid.
            OSError: If the file cannot be read or the output written.
        """
        term_width = self.term_width
        changes = line_changes or {}

        with self.assets.highlight_file(path) as highlighter:
            self._print(self.horizontal_line("┬", term_width))
            self._print(self.header(path))
            self._print(self.horizontal_line("┼", term_width))

            for line_number, line in enumerate(highlighter.lines(), start=1):
                spans = highlighter.highlight_line(line)
                self._print(self.row(line_number, changes.get(line_number), spans))

            self._print(self.horizontal_line("┴", term_width))
