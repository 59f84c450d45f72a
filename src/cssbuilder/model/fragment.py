"""Fragment model: the six kinds of simple-selector pieces and their order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """Kind of a selector fragment.

    Members are declared in the order CSS requires them inside a compound
    selector; ``rank`` is that position (1-6).
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """True for kinds that may occur at most once per selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS: dict[FragmentKind, int] = {
    kind: position for position, kind in enumerate(FragmentKind, start=1)
}

_UNIQUE_KINDS = frozenset({
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
})

_AFFIXES: dict[FragmentKind, tuple[str, str]] = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

# Human-readable order, used in error messages.
KIND_ORDER = ", ".join(kind.value for kind in FragmentKind)


@dataclass(frozen=True)
class Fragment:
    """One piece of a compound selector, e.g. ``#main`` or ``::before``."""

    kind: FragmentKind
    value: str  # name, or the attribute spec without brackets

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"{self.kind.value} fragment value must be a str, "
                f"got {type(self.value).__name__}"
            )
        if not self.value:
            raise ValueError(f"{self.kind.value} fragment must have a non-empty value")

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        return self.kind.render(self.value)

    def __str__(self) -> str:
        return self.render()
