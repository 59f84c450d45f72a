"""Lark Transformer that converts a recipe parse tree into a Recipe model."""

from __future__ import annotations

import logging
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import VisitError

from cssbuilder.model.combinator import Combinator
from cssbuilder.model.fragment import Fragment, FragmentKind
from cssbuilder.recipe.errors import RecipeError
from cssbuilder.recipe.model import CombinedRecipe, Recipe, SelectorRecipe
from cssbuilder.selector.builder import Selector
from cssbuilder.selector.combined import CombinedSelector, combine

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

log = logging.getLogger("cssbuilder.recipe")

# Call names accepted in recipes; camelCase spellings are accepted too.
_KINDS: dict[str, FragmentKind] = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "class_": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudoClass": FragmentKind.PSEUDO_CLASS,
    "pseudo_class": FragmentKind.PSEUDO_CLASS,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudoElement": FragmentKind.PSEUDO_ELEMENT,
    "pseudo_element": FragmentKind.PSEUDO_ELEMENT,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


class RecipeTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into SelectorRecipe / CombinedRecipe objects."""

    # ---- values ----

    def bare_value(self, items: list[Token]) -> str:
        return str(items[0])

    def string_value(self, items: list[Token]) -> str:
        # Strip the surrounding quotes.
        return str(items[0])[1:-1]

    # ---- structural ----

    def call(self, items: list[object]) -> Fragment:
        name = items[0]
        kind = _KINDS.get(str(name))
        if kind is None:
            raise RecipeError(
                f"Unknown call '{name}'; expected one of: {', '.join(sorted(_KINDS))}",
                line=getattr(name, "line", None),
                column=getattr(name, "column", None),
            )
        return Fragment(kind, str(items[1]))

    def selector(self, items: list[Fragment]) -> SelectorRecipe:
        return SelectorRecipe(fragments=tuple(items))

    def chain(self, items: list[object]) -> Recipe:
        if len(items) == 1:
            return items[0]  # type: ignore[return-value]
        operands = items[0::2]
        combinators = [Combinator.from_name(str(token)) for token in items[1::2]]
        return CombinedRecipe(
            operands=tuple(operands),  # type: ignore[arg-type]
            combinators=tuple(combinators),
        )

    def start(self, items: list[object]) -> Recipe:
        return items[0]  # type: ignore[return-value]


def parse_recipe(source: str) -> Recipe:
    """Parse recipe source into a Recipe model.

    Only the recipe syntax is checked here; selector grammar rules are
    applied by :func:`build_recipe` or reported by the validation rules.
    """
    parser = Lark(
        GRAMMAR_PATH.read_text(),
        parser="lalr",
        start="start",
    )
    try:
        tree = parser.parse(source)
    except Exception as e:
        # Try to extract line/column from Lark exceptions.
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise RecipeError(str(e), line=line, column=column) from e
    try:
        recipe = RecipeTransformer().transform(tree)
    except VisitError as e:
        orig = e.orig_exc
        if isinstance(orig, RecipeError):
            raise orig from None
        raise RecipeError(str(orig)) from orig
    log.debug("Parsed recipe with %d selector(s)", len(list(recipe.selectors())))
    return recipe


def build_recipe(recipe: Recipe) -> Selector | CombinedSelector:
    """Replay *recipe* through the builder.

    Raises the builder's errors (DuplicateFragmentError, OrderError) for the
    first fragment that breaks the selector grammar.
    """
    if isinstance(recipe, SelectorRecipe):
        selector = Selector()
        for fragment in recipe.fragments:
            selector.add(fragment)
        return selector
    return combine(
        [build_recipe(operand) for operand in recipe.operands],
        recipe.combinators,
    )
