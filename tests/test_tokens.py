"""Tests for token measurement and construction."""

from __future__ import annotations

import pytest

from sangria.errors import TokenContractError
from sangria.tokens import (
    BracketedToken,
    CompositeToken,
    LeafToken,
    SeparatorToken,
    Token,
    measure,
    walk,
)


def leaves(*texts: str) -> list[LeafToken]:
    return [LeafToken(t) for t in texts]


class TestLeafToken:
    """Tests for LeafToken and SeparatorToken."""

    def test_length_is_text_length(self) -> None:
        assert LeafToken("hello").length == 5
        assert LeafToken("").length == 0

    def test_never_multi_line(self) -> None:
        assert LeafToken("x" * 500).multi_line is False

    def test_defaults(self) -> None:
        token = LeafToken("x")
        assert token.splittable is False
        assert token.split_indent == 0

    def test_flags(self) -> None:
        token = LeafToken(".where", splittable=True, split_indent=1)
        assert token.splittable is True
        assert token.split_indent == 1

    def test_separator_text(self) -> None:
        sep = SeparatorToken()
        assert sep.text == ", "
        assert sep.length == 2
        assert isinstance(sep, LeafToken)

    def test_repr(self) -> None:
        assert repr(LeafToken("a")) == "LeafToken('a')"
        assert repr(LeafToken("a", splittable=True)) == "LeafToken('a', splittable=True)"
        assert repr(SeparatorToken()) == "SeparatorToken()"


class TestCompositeToken:
    """Tests for CompositeToken measurement."""

    def test_length_is_sum_of_children(self) -> None:
        token = CompositeToken(leaves("a", " + ", "b"))
        assert token.length == 5

    def test_length_excludes_inserted_commas(self) -> None:
        token = CompositeToken(leaves("1", "2", "3"), add_commas=True)
        assert token.length == 3
        assert str(token) == "1, 2, 3"

    def test_none_children_dropped(self) -> None:
        token = CompositeToken([LeafToken("a"), None, LeafToken("b"), None])
        assert len(token.children) == 2
        assert str(token) == "ab"

    def test_add_commas_marks_children_splittable(self) -> None:
        children = leaves("a", "b", "c")
        CompositeToken(children, add_commas=True)
        assert all(child.splittable for child in children)

    def test_without_commas_leaves_flags_alone(self) -> None:
        children = leaves("a", "b")
        CompositeToken(children)
        assert not any(child.splittable for child in children)

    def test_five_short_children_single_line(self) -> None:
        assert CompositeToken(leaves("1", "2", "3", "4", "5")).multi_line is False

    def test_six_short_children_multi_line(self) -> None:
        token = CompositeToken(leaves("1", "2", "3", "4", "5", "6"))
        assert token.length < 90
        assert token.multi_line is True

    def test_long_children_multi_line(self) -> None:
        token = CompositeToken([LeafToken("a" * 50), LeafToken("b" * 41)])
        assert token.length == 91
        assert token.multi_line is True

    def test_exactly_threshold_single_line(self) -> None:
        token = CompositeToken([LeafToken("a" * 45), LeafToken("b" * 45)])
        assert token.length == 90
        assert token.multi_line is False

    def test_multi_line_child_propagates(self) -> None:
        inner = CompositeToken(leaves("1", "2", "3", "4", "5", "6"))
        outer = CompositeToken([LeafToken("f"), inner])
        assert outer.multi_line is True

    def test_forced_multi_line(self) -> None:
        assert CompositeToken(leaves("a"), multi_line=True).multi_line is True

    def test_forced_single_line(self) -> None:
        token = CompositeToken(leaves("1", "2", "3", "4", "5", "6"), True, multi_line=False)
        assert token.multi_line is False
        assert str(token) == "1, 2, 3, 4, 5, 6"

    def test_add_and_add_text(self) -> None:
        token = CompositeToken()
        token.add(LeafToken("x")).add_text(".name", splittable=True, split_indent=1)
        token.add(None)
        assert len(token.children) == 2
        assert token.children[1].splittable is True
        assert token.children[1].split_indent == 1
        assert str(token) == "x.name"

    def test_add_with_commas_marks_splittable(self) -> None:
        token = CompositeToken(add_commas=True)
        child = LeafToken("a")
        token.add(child)
        assert child.splittable is True

    def test_add_after_measurement_rejected(self) -> None:
        token = CompositeToken(leaves("a"))
        assert token.length == 1
        with pytest.raises(TokenContractError, match="measured"):
            token.add(LeafToken("b"))

    def test_measurement_cached(self) -> None:
        child = LeafToken("ab")
        token = CompositeToken([child])
        assert token.length == 2
        child.text = "abcdef"
        assert token.length == 2


class TestBracketedToken:
    """Tests for BracketedToken measurement."""

    def test_length_counts_brackets(self) -> None:
        token = BracketedToken("(", ")", CompositeToken(leaves("a", "b"), True))
        assert token.length == 4

    def test_length_counts_omitted_brackets(self) -> None:
        token = BracketedToken("(", ")", LeafToken("x"), True)
        assert str(token) == "x"
        assert token.length == 3

    def test_multi_line_from_body(self) -> None:
        body = CompositeToken(leaves("1", "2", "3", "4", "5", "6"), True)
        assert BracketedToken("[", "]", body).multi_line is True

    def test_multi_line_from_new_line_before(self) -> None:
        token = BracketedToken("{", "}", LeafToken("x"), new_line_before=True)
        assert token.multi_line is True

    def test_single_for_leaf_body(self) -> None:
        assert BracketedToken("(", ")", LeafToken("x"), True).single is True

    def test_single_for_one_child_composite(self) -> None:
        body = CompositeToken(leaves("x"))
        assert BracketedToken("(", ")", body, True).single is True

    def test_not_single_for_two_children(self) -> None:
        body = CompositeToken(leaves("x", "y"))
        assert BracketedToken("(", ")", body, True).single is False

    def test_not_single_for_empty_composite(self) -> None:
        assert BracketedToken("(", ")", CompositeToken(), True).single is False

    def test_not_single_without_omit(self) -> None:
        assert BracketedToken("(", ")", LeafToken("x")).single is False

    def test_not_single_with_new_line_before(self) -> None:
        token = BracketedToken("(", ")", LeafToken("x"), True, new_line_before=True)
        assert token.single is False


class TestWalkAndMeasure:
    """Tests for tree traversal helpers."""

    def test_walk_pre_order(self) -> None:
        a, b, c = leaves("a", "b", "c")
        inner = CompositeToken([b, c])
        bracket = BracketedToken("(", ")", inner)
        root = CompositeToken([a, bracket])
        assert list(walk(root)) == [root, a, bracket, inner, b, c]

    def test_walk_single_leaf(self) -> None:
        leaf = LeafToken("x")
        assert list(walk(leaf)) == [leaf]

    def test_measure_returns_root(self) -> None:
        root = CompositeToken(leaves("a"))
        assert measure(root) is root

    def test_measure_fills_short_circuited_subtrees(self) -> None:
        first = CompositeToken(leaves("1", "2", "3", "4", "5", "6"))
        second = CompositeToken(leaves("a"))
        root = CompositeToken([first, second])

        # root.multi_line alone stops at the first multi-line child
        assert root.multi_line is True
        assert second._multi_line is None

        measure(root)
        assert second._multi_line is False

    def test_tokens_share_base(self) -> None:
        for token in (
            LeafToken("x"),
            SeparatorToken(),
            CompositeToken(),
            BracketedToken("(", ")", LeafToken("x")),
        ):
            assert isinstance(token, Token)
