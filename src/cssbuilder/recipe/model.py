"""Recipe model: the builder calls spelled out by a recipe, not yet applied."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import Fragment


@dataclass(frozen=True)
class SelectorRecipe:
    """A chain of fragment calls, in call order."""

    fragments: tuple[Fragment, ...]

    def selectors(self) -> Iterator[SelectorRecipe]:
        yield self


@dataclass(frozen=True)
class CombinedRecipe:
    """Recipes joined by combinators, as in ``a + (b ~ c)``."""

    operands: tuple[Recipe, ...]
    combinators: tuple[Combinator, ...]

    def selectors(self) -> Iterator[SelectorRecipe]:
        """Yield every selector recipe left to right, descending into groups."""
        for operand in self.operands:
            yield from operand.selectors()


Recipe = Union[SelectorRecipe, CombinedRecipe]
