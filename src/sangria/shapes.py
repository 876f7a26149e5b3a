"""Token shapes for common expression forms.

Language-agnostic combinators that assemble tokens the way an expression
front end typically does. Arguments may be tokens or plain strings; strings
become LeafTokens. The combinators know nothing about any host language's
operators or names, they only fix where breaks may happen.

Example:
    >>> from sangria import render
    >>> render(method_call("orders", "filter", [binary("o.total", ">", "100")]))
    'orders.filter((o.total > 100))'

A chain whose arguments grow past the wrap thresholds breaks before each
``.name`` and puts every argument on its own line.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from sangria.tokens import BracketedToken, CompositeToken, LeafToken, Token

Part: TypeAlias = Token | str


def _token(part: Part | None) -> Token | None:
    if isinstance(part, str):
        return LeafToken(part)
    return part


def _arguments(items: Iterable[Part | None], split_indent: int = 0) -> CompositeToken:
    return CompositeToken((_token(item) for item in items), True, split_indent=split_indent)


def binary(left: Part, operator: str, right: Part) -> BracketedToken:
    """``(left op right)``, breaking before ``right`` one level deeper.

    The parentheses are kept because the body has three parts; wrap the
    result in prefix() or another shape to have them dropped.
    """
    right_token = _token(right)
    right_token.splittable = True
    right_token.split_indent = 1
    body = CompositeToken([_token(left), LeafToken(f" {operator} "), right_token])
    return BracketedToken("(", ")", body, True)


def prefix(operator: str, operand: Part) -> CompositeToken:
    """Unary operator. Parentheses around a single-element operand are omitted.

    Example:
        >>> str(prefix("-", "x"))
        '-x'
        >>> str(prefix("!", binary("a", "&&", "b")))
        '!(a && b)'
    """
    return CompositeToken([LeafToken(operator), BracketedToken("(", ")", _token(operand), True)])


def call(callee: Part, args: Iterable[Part | None] = ()) -> CompositeToken:
    """``callee(a, b, ...)`` with comma-separated arguments one level deeper."""
    return CompositeToken([_token(callee), BracketedToken("(", ")", _arguments(args, 1))])


def method_call(target: Part, name: str, args: Iterable[Part | None] = ()) -> CompositeToken:
    """``target.name(args)``; in a multi-line chain ``.name`` starts a new line."""
    return CompositeToken(
        [
            _token(target),
            LeafToken(f".{name}", splittable=True, split_indent=1),
            BracketedToken("(", ")", _arguments(args, 1)),
        ]
    )


def member(target: Part, name: str) -> CompositeToken:
    """``target.name``; ``.name`` may start a new line like method_call()."""
    return CompositeToken([_token(target), LeafToken(f".{name}", splittable=True, split_indent=1)])


def index(target: Part, *indices: Part) -> CompositeToken:
    """``target[i, ...]``."""
    return CompositeToken([_token(target), BracketedToken("[", "]", _arguments(indices))])


def conditional(test: Part, if_true: Part, if_false: Part) -> CompositeToken:
    """``test ? if_true : if_false``, breakable before each operator."""
    return CompositeToken(
        [
            _token(test),
            LeafToken(" ? ", splittable=True),
            _token(if_true),
            LeafToken(" : ", splittable=True),
            _token(if_false),
        ]
    )


def arrow(parameters: str, body: Part, operator: str = " => ") -> CompositeToken:
    """Lambda-style ``parameters => body``; the body may wrap one level deeper."""
    body_token = _token(body)
    body_token.splittable = True
    body_token.split_indent = 1
    return CompositeToken([LeafToken(parameters + operator), body_token])


def initializer(head: Part | None, items: Iterable[Part | None]) -> CompositeToken:
    """``head`` followed by a ``{ ... }`` block, one item per line.

    The block always starts on its own line and is always multi-line.
    """
    block = CompositeToken((_token(item) for item in items), True, multi_line=True)
    return CompositeToken([_token(head), BracketedToken("{", "}", block, new_line_before=True)])


def sequence(open_bracket: str, close_bracket: str, items: Iterable[Part | None]) -> BracketedToken:
    """Comma-separated items between ``open_bracket`` and ``close_bracket``."""
    return BracketedToken(open_bracket, close_bracket, _arguments(items))


__all__ = [
    "arrow",
    "binary",
    "call",
    "conditional",
    "index",
    "initializer",
    "member",
    "method_call",
    "prefix",
    "sequence",
]
