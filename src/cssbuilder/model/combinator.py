"""Combinators joining two selectors."""

from __future__ import annotations

from enum import Enum


class Combinator(Enum):
    """Relationship between the selectors on either side of the token."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"

    @property
    def token(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Hyphenated name, e.g. ``general-sibling``."""
        return self.name.lower().replace("_", "-")

    @property
    def padded(self) -> str:
        """The token with a single space on each side, as it is serialized."""
        return f" {self.value} "

    @classmethod
    def from_name(cls, name: str) -> Combinator:
        """Look up a combinator by token, label, or recipe spelling (``>>``)."""
        normalized = name.strip().lower().replace("_", "-")
        for combinator in cls:
            if normalized == combinator.label:
                return combinator
        if name == DESCENDANT_RECIPE_TOKEN:
            return cls.DESCENDANT
        return cls(name)


# Recipes ignore whitespace, so the descendant combinator is spelled ">>".
DESCENDANT_RECIPE_TOKEN = ">>"
