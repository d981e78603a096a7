"""Text projection for transcript rendering.

Hides how message text is cut into display lines. No markdown parsing and
no sanitization happen here: every line is shown verbatim.
"""

from collections.abc import Iterator

from rich.text import Text


class MessageLines:
    """Lines of a message text, split on newline boundaries.

    Iterating is lazy and can be repeated. An empty text yields one empty
    line and a trailing newline yields a trailing empty line, so joining the
    lines with newlines gives back the original text.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def __iter__(self) -> Iterator[str]:
        start = 0
        while True:
            end = self._text.find("\n", start)
            if end == -1:
                yield self._text[start:]
                return
            yield self._text[start:end]
            start = end + 1

    def __len__(self) -> int:
        return self._text.count("\n") + 1


def render_line(line: str) -> Text:
    """Render one line with whitespace preserved and mid-word folding."""
    return Text(line, overflow="fold", no_wrap=False)
