"""Layout tokens for Sangria.

A token tree describes an expression's printable shape. Every token can
report its rendered length and whether it needs more than one line; the
renderer consults those answers node by node to decide where to break.

Token Hierarchy:
Token (base)
├── LeafToken           fixed literal text
│   └── SeparatorToken  the ", " separator
├── CompositeToken      ordered children, optional comma insertion
└── BracketedToken      delimiters around a single body

Per-Node Knobs:
- splittable: may start a new line when its parent is multi-line
- split_indent: extra indent levels applied to this token's own content
- add_commas (Composite): insert ", " between children, mark them splittable
- multi_line (Composite): force the multi-line decision
- new_line_before (Bracketed): put the body on its own line, brackets too
- omit_brackets_for_single (Bracketed): drop brackets around one element

Thread Safety:
Composite measurements are cached on first read. The cache cells are filled
without locking, so measure() a tree before sharing it across threads.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from sangria.config import get_layout_config
from sangria.errors import TokenContractError

if TYPE_CHECKING:
    from sangria.linebuilder import LineBuilder


class Token:
    """Base class for all layout tokens.

    Subclasses provide ``length`` and ``multi_line``. Rendering is handled by
    the text renderer's dispatch over the concrete token kinds.

    Attributes:
        splittable: Whether a multi-line parent may break before this token
        split_indent: Extra indent levels applied to this token's content

    """

    __slots__ = ("splittable", "_split_indent")

    def __init__(self, *, splittable: bool = False, split_indent: int = 0) -> None:
        self.splittable = splittable
        self.split_indent = split_indent

    @property
    def split_indent(self) -> int:
        return self._split_indent

    @split_indent.setter
    def split_indent(self, value: int) -> None:
        if value < 0:
            raise TokenContractError(type(self).__name__, f"split_indent must be >= 0, got {value}")
        self._split_indent = value

    @property
    def length(self) -> int:
        """Visible character count, ignoring inserted breaks and padding."""
        raise NotImplementedError

    @property
    def multi_line(self) -> bool:
        """Whether this token's own rendering spans multiple lines."""
        raise NotImplementedError

    def render(self, out: LineBuilder, indent: int) -> None:
        """Append this token to ``out``.

        Assumes the current line is already indented to ``indent`` levels
        or is mid-line. Never leaves a trailing line break of its own.

        Args:
            out: Shared output buffer
            indent: Current indent level
        """
        from sangria.renderers.text import write_token

        write_token(self, out, indent)

    def __str__(self) -> str:
        """Render this token alone at indent 0 with the active config."""
        from sangria.renderers.text import TextRenderer

        return TextRenderer().render(self)

    def _flags_repr(self) -> str:
        flags = ""
        if self.splittable:
            flags += ", splittable=True"
        if self._split_indent:
            flags += f", split_indent={self._split_indent}"
        return flags


class LeafToken(Token):
    """Token rendered as fixed literal text.

    Example:
        >>> str(LeafToken("x"))
        'x'

    """

    __slots__ = ("text",)

    def __init__(self, text: str, *, splittable: bool = False, split_indent: int = 0) -> None:
        if not isinstance(text, str):
            raise TokenContractError(
                type(self).__name__, f"text must be str, got {type(text).__name__}"
            )
        super().__init__(splittable=splittable, split_indent=split_indent)
        self.text = text

    @property
    def length(self) -> int:
        return len(self.text)

    @property
    def multi_line(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text!r}{self._flags_repr()})"


class SeparatorToken(LeafToken):
    """Leaf for the ", " separator between list elements."""

    __slots__ = ()

    def __init__(self, *, splittable: bool = False, split_indent: int = 0) -> None:
        super().__init__(", ", splittable=splittable, split_indent=split_indent)

    def __repr__(self) -> str:
        return f"SeparatorToken({self._flags_repr().removeprefix(', ')})"


class CompositeToken(Token):
    """Token made of an ordered sequence of child tokens.

    ``None`` entries are dropped at construction, so optional parts can be
    passed freely. With ``add_commas`` a ", " is written between children
    and every child is marked splittable.

    Measurements are computed once and cached. Add every child before the
    first read of ``length`` or ``multi_line``; add() and add_text() refuse
    once the cache is filled.

    Example:
        >>> args = CompositeToken([LeafToken("a"), LeafToken("b")], add_commas=True)
        >>> str(args), args.length
        ('a, b', 2)

    """

    __slots__ = ("children", "add_commas", "_forced", "_length", "_multi_line")

    def __init__(
        self,
        children: Iterable[Token | None] = (),
        add_commas: bool = False,
        *,
        multi_line: bool | None = None,
        splittable: bool = False,
        split_indent: int = 0,
    ) -> None:
        """Initialize composite token.

        Args:
            children: Child tokens in order (None entries are dropped)
            add_commas: Insert ", " between children and mark them splittable
            multi_line: Force the multi-line decision (None computes it)
            splittable: Whether a multi-line parent may break before this token
            split_indent: Extra indent levels applied to this token's content
        """
        super().__init__(splittable=splittable, split_indent=split_indent)
        self.children: list[Token] = []
        self.add_commas = add_commas
        self._forced = multi_line
        self._length: int | None = None
        self._multi_line: bool | None = None
        for child in children:
            if child is not None:
                self.add(child)

    def add(self, token: Token | None) -> CompositeToken:
        """Append a child token.

        Args:
            token: Child to append (None is ignored)

        Returns:
            self for method chaining

        Raises:
            TokenContractError: If token is not a Token or this composite
                has already been measured
        """
        if token is None:
            return self
        if not isinstance(token, Token):
            raise TokenContractError(
                type(self).__name__, f"children must be tokens, got {type(token).__name__}"
            )
        if self._length is not None or self._multi_line is not None:
            raise TokenContractError(
                type(self).__name__, "cannot add children after the token has been measured"
            )
        if self.add_commas:
            token.splittable = True
        self.children.append(token)
        return self

    def add_text(
        self, text: str, splittable: bool = False, split_indent: int = 0
    ) -> CompositeToken:
        """Append a LeafToken built from ``text``.

        Returns:
            self for method chaining
        """
        return self.add(LeafToken(text, splittable=splittable, split_indent=split_indent))

    @property
    def length(self) -> int:
        if self._length is None:
            self._length = sum(child.length for child in self.children)
        return self._length

    @property
    def multi_line(self) -> bool:
        if self._multi_line is None:
            if self._forced is not None:
                self._multi_line = self._forced
            else:
                config = get_layout_config()
                self._multi_line = (
                    self.length > config.max_line_length
                    or len(self.children) > config.max_children
                    or any(child.multi_line for child in self.children)
                )
        return self._multi_line

    def __repr__(self) -> str:
        commas = ", add_commas=True" if self.add_commas else ""
        forced = f", multi_line={self._forced}" if self._forced is not None else ""
        return f"CompositeToken({self.children!r}{commas}{forced}{self._flags_repr()})"


class BracketedToken(Token):
    """Token that wraps a body in open/close delimiters.

    A single short element can drop its brackets (``omit_brackets_for_single``);
    a multi-line body gets the brackets on their own lines with the body one
    level deeper. ``new_line_before`` starts the whole bracket on a new line.

    ``length`` counts both bracket strings even when they are omitted from
    the output. It only feeds the multi-line decision.

    Example:
        >>> str(BracketedToken("(", ")", LeafToken("x"), True))
        'x'
        >>> str(BracketedToken("(", ")", LeafToken("x")))
        '(x)'

    """

    __slots__ = ("open_bracket", "close_bracket", "body", "omit_brackets_for_single", "new_line_before")

    def __init__(
        self,
        open_bracket: str,
        close_bracket: str,
        body: Token,
        omit_brackets_for_single: bool = False,
        *,
        new_line_before: bool = False,
        splittable: bool = False,
        split_indent: int = 0,
    ) -> None:
        """Initialize bracketed token.

        Args:
            open_bracket: Opening delimiter text
            close_bracket: Closing delimiter text
            body: Wrapped token (required)
            omit_brackets_for_single: Drop the brackets when the body is one element
            new_line_before: Start the bracket on its own line
            splittable: Whether a multi-line parent may break before this token
            split_indent: Extra indent levels applied to this token's content

        Raises:
            TokenContractError: If body is missing or not a Token, or a
                bracket is not a string
        """
        kind = type(self).__name__
        if body is None:
            raise TokenContractError(kind, "body is required")
        if not isinstance(body, Token):
            raise TokenContractError(kind, f"body must be a token, got {type(body).__name__}")
        if not isinstance(open_bracket, str) or not isinstance(close_bracket, str):
            raise TokenContractError(kind, "brackets must be strings")
        super().__init__(splittable=splittable, split_indent=split_indent)
        self.open_bracket = open_bracket
        self.close_bracket = close_bracket
        self.body = body
        self.omit_brackets_for_single = omit_brackets_for_single
        self.new_line_before = new_line_before

    @property
    def single(self) -> bool:
        """Whether the brackets are dropped when rendering."""
        if self.new_line_before or not self.omit_brackets_for_single:
            return False
        return not isinstance(self.body, CompositeToken) or len(self.body.children) == 1

    @property
    def length(self) -> int:
        return self.body.length + len(self.open_bracket) + len(self.close_bracket)

    @property
    def multi_line(self) -> bool:
        return self.body.multi_line or self.new_line_before

    def __repr__(self) -> str:
        flags = self._flags_repr()
        if self.omit_brackets_for_single:
            flags = ", omit_brackets_for_single=True" + flags
        if self.new_line_before:
            flags = ", new_line_before=True" + flags
        return f"BracketedToken({self.open_bracket!r}, {self.close_bracket!r}, {self.body!r}{flags})"


def walk(token: Token) -> Iterator[Token]:
    """Yield every token in the tree rooted at ``token``, pre-order.

    Iterative, so deep trees do not hit the recursion limit.
    """
    stack = [token]
    while stack:
        current = stack.pop()
        yield current
        match current:
            case CompositeToken():
                stack.extend(reversed(current.children))
            case BracketedToken():
                stack.append(current.body)


def measure(token: Token) -> Token:
    """Fill every cached measurement in the tree and return the root.

    Composite measurements short-circuit, so reading the root alone leaves
    parts of the tree unmeasured. Call this before rendering a tree from
    several threads at once.

    Example:
        >>> root = measure(build_tree())
        >>> with ThreadPoolExecutor() as pool:
        ...     outputs = list(pool.map(lambda _: str(root), range(8)))

    """
    for node in reversed(list(walk(token))):
        _ = node.length
        _ = node.multi_line
    return token


__all__ = [
    "BracketedToken",
    "CompositeToken",
    "LeafToken",
    "SeparatorToken",
    "Token",
    "measure",
    "walk",
]
