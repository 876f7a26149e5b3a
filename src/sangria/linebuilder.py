"""LineBuilder: O(n) text accumulation with indentation-aware line breaks.

Builds on the StringBuilder pattern: appends to a list, joins once at the
end. On top of that it owns the one primitive every token uses to wrap,
``newline(indent)``.

Fresh-Line State:
The builder remembers whether its last emission was a line break with no
text after it. On such a fresh line the indentation is still pending, so
another break request only adjusts the pending width instead of writing a
second terminator. Two requests at the same point never stack blank lines,
and a request one level deeper simply widens the indentation.

Padding is written lazily, when the next non-empty text arrives or when
build() is called.

Thread Safety:
LineBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from sangria.errors import RenderError


class LineBuilder:
    """Efficient text accumulator with idempotent line breaks.

    Usage:
            >>> out = LineBuilder(newline="\\n")
            >>> out.append("items:")
            >>> out.newline(1)
            >>> out.newline(1)
            >>> out.append("first")
            >>> out.build()
            'items:\\n   first'

    Thread Safety:
        Instance is local to each render() call.
        No shared mutable state.

    """

    __slots__ = ("_parts", "_indent_width", "_newline", "_fresh_line", "_pending")

    def __init__(self, *, indent_width: int = 3, newline: str = "\r\n") -> None:
        """Initialize an empty builder.

        Args:
            indent_width: Spaces per indent level
            newline: Line terminator written by newline()
        """
        self._parts: list[str] = []
        self._indent_width = indent_width
        self._newline = newline
        self._fresh_line = False
        self._pending = 0

    @property
    def at_line_start(self) -> bool:
        """True when the last emission was a line break with no text after it."""
        return self._fresh_line

    @property
    def indent_width(self) -> int:
        return self._indent_width

    def append(self, s: str) -> LineBuilder:
        """Append text to the current line.

        Args:
            s: Text to append (empty strings are skipped and leave the
                fresh-line state untouched)

        Returns:
            self for method chaining
        """
        if s:
            if self._fresh_line:
                if self._pending:
                    self._parts.append(" " * self._pending)
                self._fresh_line = False
                self._pending = 0
            self._parts.append(s)
        return self

    def newline(self, indent: int) -> LineBuilder:
        """Move to the start of a line indented ``indent`` levels.

        On a fresh line the pending indentation is replaced, otherwise a
        terminator is written. An empty builder is not on a fresh line.

        Args:
            indent: Indent level (not columns) for the new line

        Returns:
            self for method chaining

        Raises:
            RenderError: If indent is negative
        """
        if indent < 0:
            raise RenderError(f"Cannot break to negative indent level {indent}")
        if not self._fresh_line:
            self._parts.append(self._newline)
            self._fresh_line = True
        self._pending = indent * self._indent_width
        return self

    def build(self) -> str:
        """Join all parts into the final string.

        Returns:
            Concatenated output, including the padding of a trailing fresh line
        """
        text = "".join(self._parts)
        if self._fresh_line and self._pending:
            text += " " * self._pending
        return text

    def clear(self) -> LineBuilder:
        """Discard all output and return to the empty state.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        self._fresh_line = False
        self._pending = 0
        return self

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if anything has been emitted."""
        return bool(self._parts)
