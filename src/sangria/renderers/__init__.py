"""Sangria renderers.

Renderers turn a token tree into text.

Available Renderers:
- TextRenderer: indented, line-wrapped plain text built with LineBuilder

Thread Safety:
Renderers use a LineBuilder local to each render() call.
Safe for concurrent use once the token tree has been measured.

"""

from sangria.renderers.protocol import LayoutRenderer
from sangria.renderers.text import TextRenderer, write_token

__all__ = ["LayoutRenderer", "TextRenderer", "write_token"]
