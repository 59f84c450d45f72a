"""Validation rules for fragment sequences.

Each rule is a function taking a sequence of fragments and returning a list
of Diagnostic objects describing any issues found. The ERROR rules report
exactly what :class:`~cssbuilder.selector.Selector` refuses to build, but
collect every occurrence instead of stopping at the first.
"""

from __future__ import annotations

from typing import Sequence

from cssbuilder.model.diagnostic import Diagnostic, Severity
from cssbuilder.model.fragment import KIND_ORDER, Fragment, FragmentKind


# ---------------------------------------------------------------------------
# Grammar rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_unique_kinds(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Element, id and pseudo-element may occur at most once."""
    seen: set[FragmentKind] = set()
    diagnostics: list[Diagnostic] = []
    for position, fragment in enumerate(fragments):
        kind = fragment.kind
        if not kind.unique:
            continue
        if kind in seen:
            diagnostics.append(
                Diagnostic(
                    rule="check_unique_kinds",
                    severity=Severity.ERROR,
                    message=f"Duplicate {kind.value} '{fragment.render()}'; "
                    f"a selector may contain only one {kind.value}.",
                    position=position,
                    fix=f"Remove '{fragment.render()}' or split it into a separate selector.",
                )
            )
        seen.add(kind)
    return diagnostics


def check_kind_order(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Fragment kinds must appear in non-decreasing rank."""
    diagnostics: list[Diagnostic] = []
    latest: Fragment | None = None
    for position, fragment in enumerate(fragments):
        if latest is not None and fragment.rank < latest.rank:
            diagnostics.append(
                Diagnostic(
                    rule="check_kind_order",
                    severity=Severity.ERROR,
                    message=f"{fragment.kind.value.capitalize()} '{fragment.render()}' "
                    f"appears after {latest.kind.value} '{latest.render()}'. "
                    f"Required order: {KIND_ORDER}.",
                    position=position,
                    fix=f"Move '{fragment.render()}' before '{latest.render()}'.",
                )
            )
            continue
        if latest is None or fragment.rank > latest.rank:
            latest = fragment
    return diagnostics


# ---------------------------------------------------------------------------
# Style rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_redundant_universal(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """A ``*`` element adds nothing when other fragments follow it."""
    if len(fragments) < 2:
        return []
    first = fragments[0]
    if first.kind is FragmentKind.ELEMENT and first.value == "*":
        return [
            Diagnostic(
                rule="check_redundant_universal",
                severity=Severity.WARNING,
                message="Universal selector '*' is redundant when followed by other parts.",
                position=0,
                fix="Drop the '*' element.",
            )
        ]
    return []


ALL_RULES = [
    check_unique_kinds,
    check_kind_order,
    check_redundant_universal,
]
