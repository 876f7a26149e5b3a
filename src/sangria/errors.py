"""Exception classes for Sangria.

Provides standardized exceptions for contract violations in token trees.
Nothing in Sangria performs I/O, so every error here signals a programming
mistake in the code that built or rendered the tree.
"""

from __future__ import annotations


class SangriaError(Exception):
    """Base exception for all Sangria errors.

    Subclass this for specific error categories.
    """

    pass


class TokenContractError(SangriaError):
    """A token was built or used in a way its contract forbids.

    Raised for a missing bracket body, a non-token child, a negative
    split indent, or children added after the token was measured.
    """

    def __init__(self, token_kind: str, message: str) -> None:
        """Initialize token contract error.

        Args:
            token_kind: Name of the token class involved (e.g., "BracketedToken")
            message: Description of the contract violation
        """
        self.token_kind = token_kind
        self.message = message
        super().__init__(f"{token_kind}: {message}")


class RenderError(SangriaError):
    """Error during layout rendering.

    Raised when the renderer reaches an object it cannot lay out
    or is asked for an impossible indentation.
    """

    pass


class ConfigError(SangriaError):
    """Invalid layout configuration value.

    Raised by LayoutConfig when a field is out of range.
    """

    def __init__(self, field_name: str, message: str) -> None:
        """Initialize config error.

        Args:
            field_name: Name of the offending LayoutConfig field
            message: Description of the problem
        """
        self.field_name = field_name
        super().__init__(f"LayoutConfig.{field_name}: {message}")
