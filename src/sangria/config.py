"""ContextVar-based layout configuration for Sangria.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The defaults reproduce the classic layout: three spaces per indent level,
CRLF line terminators, and composites that wrap once they exceed 90
characters or 5 children.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Render with a custom config
    from sangria import render
    from sangria.config import LayoutConfig

    text = render(root, config=LayoutConfig(indent_width=4, newline="\\n"))

    # Or activate it for a block of work
    with layout_config_context(LayoutConfig(newline="\\n")):
        text = str(root)

Note:
    The wrap thresholds are read when a composite is first measured and
    cached with it. Build and measure a tree under the config it will be
    rendered with.

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from sangria.errors import ConfigError


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable layout configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        indent_width: Spaces emitted per indent level
        newline: Line terminator written on every break
        max_line_length: Composite length above which it renders multi-line
        max_children: Composite child count above which it renders multi-line

    """

    indent_width: int = 3
    newline: str = "\r\n"
    max_line_length: int = 90
    max_children: int = 5

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ConfigError("indent_width", f"must be >= 0, got {self.indent_width}")
        if self.max_line_length < 0:
            raise ConfigError("max_line_length", f"must be >= 0, got {self.max_line_length}")
        if self.max_children < 0:
            raise ConfigError("max_children", f"must be >= 0, got {self.max_children}")
        if not self.newline or self.newline.strip("\r\n"):
            raise ConfigError("newline", f"must be a non-empty line terminator, got {self.newline!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LayoutConfig":
        """Create LayoutConfig from dictionary.

        Useful when layout settings come from an external source such as
        a TOML or YAML file. Unknown keys are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LayoutConfig attribute names.

        Returns:
            New LayoutConfig instance with values from dict.

        Example:
            >>> config = LayoutConfig.from_dict({
            ...     "indent_width": 4,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.indent_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LayoutConfig = LayoutConfig()

_layout_config: ContextVar[LayoutConfig] = ContextVar(
    "layout_config",
    default=_DEFAULT_CONFIG,
)


def get_layout_config() -> LayoutConfig:
    """Get current layout configuration (thread-local).

    Returns:
        The active LayoutConfig for this thread/context.

    """
    return _layout_config.get()


def set_layout_config(config: LayoutConfig) -> None:
    """Set layout configuration for current context.

    Args:
        config: LayoutConfig instance to use for this context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _layout_config.set(config)


def reset_layout_config() -> None:
    """Reset to default configuration."""
    _layout_config.set(_DEFAULT_CONFIG)


@contextmanager
def layout_config_context(config: LayoutConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LayoutConfig to use within the context.

    Yields:
        None

    Example:
        >>> with layout_config_context(LayoutConfig(indent_width=2)):
        ...     text = str(root)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _layout_config.get()
    _layout_config.set(config)
    try:
        yield
    finally:
        _layout_config.set(previous)


__all__ = [
    "LayoutConfig",
    "get_layout_config",
    "set_layout_config",
    "reset_layout_config",
    "layout_config_context",
]
