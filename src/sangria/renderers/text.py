"""Plain-text renderer for layout tokens.

Walks a token tree depth-first and writes it into a LineBuilder, deciding
node by node where to break lines and how far to indent.

Composite Layout:
Children are written in order, with ", " between them when add_commas is
set. When the composite itself is multi-line, a break is emitted before
every splittable child. Each child renders at the parent indent plus its
own split_indent, so a subtree can ask for extra depth for itself alone.

Bracket Layout:
A single short element can lose its brackets. A multi-line body is written
one level deeper, and its closing bracket returns to the indent recorded
when the opening bracket was written. If the bracket starts on a fresh line
(its parent just broke before it) the pending indentation is deepened
rather than a second line being started.

Thread Safety:
Each render() call creates its own LineBuilder. Token measurements are
cached on first read, so call sangria.tokens.measure() before sharing one
tree between threads.
"""

from sangria.config import LayoutConfig, get_layout_config, layout_config_context
from sangria.errors import RenderError, TokenContractError
from sangria.linebuilder import LineBuilder
from sangria.tokens import BracketedToken, CompositeToken, LeafToken, Token
from sangria.utils.logger import get_logger

logger = get_logger(__name__)


def write_token(token: Token, out: LineBuilder, indent: int) -> None:
    """Write ``token`` into ``out`` at indent level ``indent``.

    Raises:
        RenderError: If the object is not one of the known token kinds
    """
    match token:
        case LeafToken():
            out.append(token.text)
        case CompositeToken():
            _write_composite(token, out, indent)
        case BracketedToken():
            _write_bracketed(token, out, indent)
        case _:
            raise RenderError(f"Cannot render {type(token).__name__}: not a known token kind")


def _write_composite(token: CompositeToken, out: LineBuilder, indent: int) -> None:
    multi_line = token.multi_line
    first = True
    for child in token.children:
        if first:
            first = False
        elif token.add_commas:
            out.append(", ")

        child_indent = indent + child.split_indent
        if multi_line and child.splittable:
            out.newline(child_indent)
        write_token(child, out, child_indent)


def _write_bracketed(token: BracketedToken, out: LineBuilder, indent: int) -> None:
    body = token.body
    single = token.single
    open_indent = indent

    if token.new_line_before:
        out.newline(indent)
        out.append(token.open_bracket)

    already_indented = out.at_line_start
    if body.multi_line:
        indent += 1
    if token.new_line_before or already_indented:
        out.newline(indent)
    if not token.new_line_before and not single:
        out.append(token.open_bracket)
        open_indent = indent

    write_token(body, out, indent + body.split_indent)

    if body.multi_line:
        out.newline(open_indent)
    if not single:
        out.append(token.close_bracket)


class TextRenderer:
    """Render a token tree to indented, line-wrapped text.

    Usage:
        >>> from sangria.tokens import CompositeToken, LeafToken
        >>> root = CompositeToken([LeafToken("a"), LeafToken(" + "), LeafToken("b")])
        >>> TextRenderer().render(root)
        'a + b'

    Thread Safety:
        Multiple threads can share one TextRenderer. Each render() call
        creates an independent LineBuilder.
    """

    __slots__ = ("_config",)

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Layout configuration to activate while rendering
                (uses the current context's config if None)
        """
        self._config = config

    def render(self, token: Token) -> str:
        """Render ``token`` at indent 0.

        Args:
            token: Root of the token tree

        Returns:
            Rendered text

        Raises:
            TokenContractError: If token is None or not a Token
        """
        if not isinstance(token, Token):
            raise TokenContractError(
                "TextRenderer", f"cannot render {type(token).__name__}, expected a token"
            )

        config = self._config or get_layout_config()
        with layout_config_context(config):
            out = LineBuilder(indent_width=config.indent_width, newline=config.newline)
            write_token(token, out, 0)
        text = out.build()

        logger.debug(
            "Rendered %s: %d chars, %d lines",
            type(token).__name__,
            len(text),
            text.count(config.newline) + 1,
        )
        return text
