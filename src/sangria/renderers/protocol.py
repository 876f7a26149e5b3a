"""LayoutRenderer protocol: stable interface for token renderers.

Any renderer that implements ``render(token) -> str`` conforms to this protocol.
The built-in ``TextRenderer`` is the reference implementation.

Example:
    from sangria.renderers.protocol import LayoutRenderer

    def show(renderer: LayoutRenderer, root: Token) -> None:
        print(renderer.render(root))

"""

from typing import Protocol

from sangria.tokens import Token


class LayoutRenderer(Protocol):
    """Protocol for token renderers.

    Implementations must accept a root Token and return a rendered string.

    """

    def render(self, token: Token) -> str:
        """Render a token tree to a string.

        Args:
            token: The root of the token tree.

        Returns:
            Rendered string output.

        """
        ...
