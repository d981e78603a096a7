"""Unit tests for transcript line projection."""
from hypothesis import given
from hypothesis import strategies as st

from brochat.ui.formatting import MessageLines, render_line


class TestMessageLines:

    def test_splits_on_newlines(self):
        assert list(MessageLines("a\nb\n\nc")) == ["a", "b", "", "c"]

    def test_empty_text_is_one_empty_line(self):
        assert list(MessageLines("")) == [""]

    def test_trailing_newline_yields_trailing_empty_line(self):
        assert list(MessageLines("a\n")) == ["a", ""]

    def test_whitespace_is_preserved(self):
        assert list(MessageLines("  indented\t\n  x ")) == ["  indented\t", "  x "]

    def test_is_lazy(self):
        lines = iter(MessageLines("first\n" + "x" * 10))
        assert next(lines) == "first"

    @given(st.text())
    def test_restartable_and_lossless(self, text):
        lines = MessageLines(text)
        first = list(lines)
        second = list(lines)

        assert first == second
        assert "\n".join(first) == text
        assert len(lines) == len(first)


class TestRenderLine:

    def test_folds_long_words(self):
        text = render_line("supercalifragilistic")
        assert text.plain == "supercalifragilistic"
        assert text.overflow == "fold"
        assert not text.no_wrap

    def test_markup_is_not_interpreted(self):
        assert render_line("[bold]hi[/bold]").plain == "[bold]hi[/bold]"
