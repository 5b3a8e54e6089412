"""
Syntax highlighting assets and per-file highlighters.

Themes come from rich's syntax theme table (which wraps the pygments
styles) and tokenizing is done by pygments lexers chosen from the
filename.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Optional, Union

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.styles import get_all_styles
from pygments.token import _TokenType
from pygments.util import ClassNotFound
from rich.style import Style
from rich.syntax import RICH_SYNTAX_THEMES, Syntax, SyntaxTheme

DEFAULT_THEME = "monokai"
INVALID_UTF8_PLACEHOLDER = "<INVALID UTF-8>"

# (text, style) pairs covering one line
Spans = list[tuple[str, Style]]

_LEXER_OPTIONS = {"stripnl": False, "stripall": False, "ensurenl": False}


class ThemeNotFoundError(Exception):
    """The requested syntax theme does not exist."""
    pass


def available_themes() -> list[str]:
    """List every theme name accepted by HighlightingAssets.load()."""
    return sorted(set(get_all_styles()) | set(RICH_SYNTAX_THEMES))


def _lexer_for(path: Union[str, Path]) -> Lexer:
    try:
        return get_lexer_for_filename(str(path), **_LEXER_OPTIONS)
    except ClassNotFound:
        return TextLexer(**_LEXER_OPTIONS)


@dataclass(frozen=True)
class HighlightingAssets:
    """Theme data loaded once and shared by every file of a run."""

    theme_name: str
    theme: SyntaxTheme

    @classmethod
    def load(cls, theme_name: str = DEFAULT_THEME) -> "HighlightingAssets":
        """
        Load a syntax theme by name.

        Args:
            theme_name: A pygments style name or one of rich's ANSI themes.

        Returns:
            The loaded assets.

        Raises:
            ThemeNotFoundError: If no theme has that name.
        """
        # rich silently falls back to the default style for unknown names
        if theme_name not in available_themes():
            raise ThemeNotFoundError(f"Could not find theme '{theme_name}'")
        return cls(theme_name=theme_name, theme=Syntax.get_theme(theme_name))

    def highlight_file(self, path: Union[str, Path]) -> "HighlightedFile":
        """Open a file for line-by-line highlighting."""
        return HighlightedFile(path, self.theme)


class HighlightedFile:
    """
    Reads a file line by line and highlights each line.

    Lines must be consumed in order and an instance is used for one file
    only. Use as a context manager so the file handle is closed.

    The lexer is chosen once per file, but pygments cannot resume lexing
    in the middle of a file, so each line is tokenized from the lexer's
    initial state. Constructs spanning lines (triple-quoted strings, block
    comments) are therefore colored as if each line stood alone.
    """

    def __init__(self, path: Union[str, Path], theme: SyntaxTheme) -> None:
        self.path = path
        self.theme = theme
        self.lexer = _lexer_for(path)
        self._file: BinaryIO = open(path, "rb")

    def __enter__(self) -> "HighlightedFile":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def close(self) -> None:
        self._file.close()

    def lines(self) -> Iterator[str]:
        """Yield each line without its terminator, decoding lazily."""
        for raw in self._file:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            try:
                yield raw.decode("utf-8")
            except UnicodeDecodeError:
                yield INVALID_UTF8_PLACEHOLDER

    def _style_for(self, token_type: _TokenType) -> Style:
        style = self.theme.get_style_for_token(token_type)
        # Only the foreground is used; the terminal keeps its own background
        return Style(
            color=style.color,
            bold=style.bold,
            italic=style.italic,
            underline=style.underline,
        )

    def highlight_line(self, line: str) -> Spans:
        """
        Tokenize one line.

        Args:
            line: The line text, without a line terminator.

        Returns:
            (text, style) pairs whose texts concatenate to the line.
        """
        # get_tokens() would turn a lone "\r" into a line break
        return [
            (value, self._style_for(token_type))
            for _, token_type, value in self.lexer.get_tokens_unprocessed(line)
            if value
        ]
