"""Tests for the fragment, combinator and diagnostic models."""

import pytest

from cssbuilder.model import (
    KIND_ORDER,
    Combinator,
    Diagnostic,
    Fragment,
    FragmentKind,
    Severity,
)
from cssbuilder.selector import Selector


# ---------------------------------------------------------------------------
# FragmentKind
# ---------------------------------------------------------------------------


class TestFragmentKind:
    def test_ranks_follow_css_order(self) -> None:
        ranks = [kind.rank for kind in FragmentKind]
        assert ranks == [1, 2, 3, 4, 5, 6]
        assert FragmentKind.ELEMENT.rank < FragmentKind.ID.rank
        assert FragmentKind.PSEUDO_CLASS.rank < FragmentKind.PSEUDO_ELEMENT.rank

    def test_unique_kinds(self) -> None:
        unique = {kind for kind in FragmentKind if kind.unique}
        assert unique == {
            FragmentKind.ELEMENT,
            FragmentKind.ID,
            FragmentKind.PSEUDO_ELEMENT,
        }

    def test_kind_order_text(self) -> None:
        assert KIND_ORDER == (
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


# ---------------------------------------------------------------------------
# Fragment
# ---------------------------------------------------------------------------


class TestFragment:
    @pytest.mark.parametrize(
        "kind, value, expected",
        [
            (FragmentKind.ELEMENT, "div", "div"),
            (FragmentKind.ID, "main", "#main"),
            (FragmentKind.CLASS, "container", ".container"),
            (FragmentKind.ATTRIBUTE, 'href$=".png"', '[href$=".png"]'),
            (FragmentKind.PSEUDO_CLASS, "nth-of-type(even)", ":nth-of-type(even)"),
            (FragmentKind.PSEUDO_ELEMENT, "before", "::before"),
        ],
    )
    def test_render(self, kind: FragmentKind, value: str, expected: str) -> None:
        fragment = Fragment(kind, value)
        assert fragment.render() == expected
        assert str(fragment) == expected

    def test_rank_delegates_to_kind(self) -> None:
        assert Fragment(FragmentKind.ATTRIBUTE, "href").rank == 4

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            Fragment(FragmentKind.CLASS, "")

    @pytest.mark.parametrize("value", [0, None, 1.5, b"div"])
    def test_non_str_value_rejected(self, value: object) -> None:
        with pytest.raises(TypeError, match="must be a str"):
            Fragment(FragmentKind.CLASS, value)  # type: ignore[arg-type]

    def test_builder_rejects_non_str(self) -> None:
        with pytest.raises(TypeError, match="got int"):
            Selector().class_(0)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        fragment = Fragment(FragmentKind.ID, "main")
        with pytest.raises(AttributeError):
            fragment.value = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert Fragment(FragmentKind.ID, "a") == Fragment(FragmentKind.ID, "a")
        assert Fragment(FragmentKind.ID, "a") != Fragment(FragmentKind.CLASS, "a")


# ---------------------------------------------------------------------------
# Combinator
# ---------------------------------------------------------------------------


class TestCombinator:
    def test_tokens(self) -> None:
        assert {c.token for c in Combinator} == {" ", ">", "+", "~"}

    def test_lookup_by_token(self) -> None:
        assert Combinator("+") is Combinator.ADJACENT_SIBLING
        assert Combinator(" ") is Combinator.DESCENDANT

    def test_padded(self) -> None:
        assert Combinator.CHILD.padded == " > "
        assert Combinator.DESCENDANT.padded == "   "

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("descendant", Combinator.DESCENDANT),
            ("child", Combinator.CHILD),
            ("Adjacent-Sibling", Combinator.ADJACENT_SIBLING),
            ("general_sibling", Combinator.GENERAL_SIBLING),
            ("~", Combinator.GENERAL_SIBLING),
            (">>", Combinator.DESCENDANT),
        ],
    )
    def test_from_name(self, name: str, expected: Combinator) -> None:
        assert Combinator.from_name(name) is expected

    def test_labels_round_trip(self) -> None:
        for combinator in Combinator:
            assert Combinator.from_name(combinator.label) is combinator
        assert Combinator.ADJACENT_SIBLING.label == "adjacent-sibling"

    def test_from_name_unknown(self) -> None:
        with pytest.raises(ValueError):
            Combinator.from_name("cousin")


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_str_with_position(self) -> None:
        diag = Diagnostic(
            rule="r", severity=Severity.ERROR, message="bad", position=2
        )
        assert str(diag) == "ERROR [fragment=2]: bad"
        assert diag.is_error
        assert not diag.is_warning

    def test_str_with_operand_and_position(self) -> None:
        diag = Diagnostic(
            rule="r", severity=Severity.WARNING, message="meh", position=0, operand=1
        )
        assert str(diag) == "WARNING [selector=1 fragment=0]: meh"
        assert diag.is_warning

    def test_str_without_location(self) -> None:
        diag = Diagnostic(rule="r", severity=Severity.INFO, message="note")
        assert str(diag) == "INFO: note"
