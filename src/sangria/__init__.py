"""
Sangria: Layout Engine for Pretty-Printing Expression Trees

Sangria turns a tree of layout tokens into readable, indented text with
automatic line wrapping. A front end decomposes its own expression
representation into tokens; Sangria measures them and decides where to
break, how far to indent, and when brackets can be dropped.

Quick Start:
    >>> from sangria import CompositeToken, LeafToken, render
    >>> render(CompositeToken([LeafToken("a"), LeafToken(" + "), LeafToken("b")]))
    'a + b'

    >>> # Shapes assemble common expression forms
    >>> from sangria.shapes import call
    >>> render(call("max", ["a", "b"]))
    'max(a, b)'

Wrapping:
    A composite goes multi-line once its length exceeds 90 characters, it has
    more than 5 children, or any child is multi-line. Every splittable child of
    a multi-line composite starts on its own line, indented 3 spaces per level.
    Both thresholds and the indentation are configurable via LayoutConfig.
"""

from sangria.config import (
    LayoutConfig,
    get_layout_config,
    layout_config_context,
    reset_layout_config,
    set_layout_config,
)
from sangria.errors import ConfigError, RenderError, SangriaError, TokenContractError
from sangria.linebuilder import LineBuilder
from sangria.renderers.protocol import LayoutRenderer
from sangria.renderers.text import TextRenderer
from sangria.tokens import (
    BracketedToken,
    CompositeToken,
    LeafToken,
    SeparatorToken,
    Token,
    measure,
    walk,
)

__version__ = "0.1.0"


def render(token: Token, *, config: LayoutConfig | None = None) -> str:
    """Render a token tree to text.

    Args:
        token: Root of the token tree
        config: Layout configuration (uses the current context's config if None)

    Returns:
        Rendered text, starting at indent 0

    Raises:
        TokenContractError: If token is None or not a Token

    Example:
        >>> render(LeafToken("x"))
        'x'
    """
    return TextRenderer(config).render(token)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    "measure",
    "walk",
    # Tokens
    "Token",
    "LeafToken",
    "SeparatorToken",
    "CompositeToken",
    "BracketedToken",
    # Rendering
    "LineBuilder",
    "TextRenderer",
    "LayoutRenderer",
    # Configuration (ContextVar-based)
    "LayoutConfig",
    "get_layout_config",
    "set_layout_config",
    "reset_layout_config",
    "layout_config_context",
    # Errors
    "SangriaError",
    "TokenContractError",
    "RenderError",
    "ConfigError",
]
