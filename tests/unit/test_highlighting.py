"""
Unit tests for the highlighting assets.
"""

from pathlib import Path

import pytest
from pygments.lexers.special import TextLexer
from rich.syntax import SyntaxTheme

from batview.highlighting import (
    INVALID_UTF8_PLACEHOLDER,
    HighlightingAssets,
    ThemeNotFoundError,
    available_themes,
)


class TestHighlightingAssets:
    """Tests for HighlightingAssets."""

    def test_load_default(self) -> None:
        """Test loading the default theme."""
        assets = HighlightingAssets.load()

        assert assets.theme_name == "monokai"
        assert isinstance(assets.theme, SyntaxTheme)

    def test_load_rich_theme(self) -> None:
        """Test that rich's ANSI themes are accepted."""
        assets = HighlightingAssets.load("ansi_dark")
        assert assets.theme_name == "ansi_dark"

    def test_unknown_theme(self) -> None:
        """Test that an unknown theme is an error, not a silent fallback."""
        with pytest.raises(ThemeNotFoundError):
            HighlightingAssets.load("no-such-theme")

    def test_available_themes(self) -> None:
        """Test the theme listing."""
        themes = available_themes()
        assert "monokai" in themes
        assert themes == sorted(themes)


class TestHighlightedFile:
    """Tests for HighlightedFile."""

    def test_missing_file(self, assets: HighlightingAssets, tmp_path: Path) -> None:
        """Test that opening a missing file raises."""
        with pytest.raises(FileNotFoundError):
            assets.highlight_file(tmp_path / "missing.py")

    def test_lines_strip_terminators(self, assets: HighlightingAssets, tmp_path: Path) -> None:
        """Test that LF and CRLF terminators are removed."""
        path = tmp_path / "mixed.txt"
        path.write_bytes(b"one\ntwo\r\nthree")

        with assets.highlight_file(path) as highlighter:
            assert list(highlighter.lines()) == ["one", "two", "three"]

    def test_invalid_utf8_line(self, assets: HighlightingAssets, tmp_path: Path) -> None:
        """Test that undecodable lines become the placeholder."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"ok\n\xff\xfe broken\nstill ok\n")

        with assets.highlight_file(path) as highlighter:
            lines = list(highlighter.lines())

        assert lines == ["ok", INVALID_UTF8_PLACEHOLDER, "still ok"]

    def test_highlight_covers_line(self, assets: HighlightingAssets, sample_file: Path) -> None:
        """Test that spans concatenate back to the line."""
        with assets.highlight_file(sample_file) as highlighter:
            for line in highlighter.lines():
                spans = highlighter.highlight_line(line)
                assert "".join(text for text, _ in spans) == line

    def test_highlight_uses_theme_colors(self, assets: HighlightingAssets, sample_file: Path) -> None:
        """Test that keywords get a foreground color and no background."""
        with assets.highlight_file(sample_file) as highlighter:
            spans = highlighter.highlight_line("def main():")

        styles = dict(spans)
        assert styles["def"].color is not None
        assert all(style.bgcolor is None for _, style in spans)

    def test_unknown_extension_is_plain_text(self, assets: HighlightingAssets, tmp_path: Path) -> None:
        """Test the plain text fallback lexer."""
        path = tmp_path / "notes.unknown-extension"
        path.write_text("hello world\n", encoding="utf-8")

        with assets.highlight_file(path) as highlighter:
            assert isinstance(highlighter.lexer, TextLexer)
            assert highlighter.highlight_line("") == []

    def test_lone_carriage_return_stays_in_line(self, assets: HighlightingAssets, tmp_path: Path) -> None:
        """Test that a CR inside a line is neither a line break nor lost from the spans."""
        path = tmp_path / "cr.txt"
        path.write_bytes(b"a\rb\nc\r")

        with assets.highlight_file(path) as highlighter:
            lines = list(highlighter.lines())
            spans = [highlighter.highlight_line(line) for line in lines]

        assert lines == ["a\rb", "c\r"]
        for line, line_spans in zip(lines, spans):
            assert "".join(text for text, _ in line_spans) == line
            assert all("\n" not in text for text, _ in line_spans)

    def test_carriage_return_in_source_code(self, assets: HighlightingAssets, sample_file: Path) -> None:
        """Test that a real lexer keeps a CR inside the line's spans."""
        line = 'x = "a\rb"  # note'

        with assets.highlight_file(sample_file) as highlighter:
            spans = highlighter.highlight_line(line)

        assert "".join(text for text, _ in spans) == line
