"""Run the fragment rules over a selector or every selector of a recipe."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Sequence

from cssbuilder.model.diagnostic import Diagnostic
from cssbuilder.model.fragment import Fragment
from cssbuilder.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from cssbuilder.recipe.model import Recipe


def validate(fragments: Sequence[Fragment]) -> list[Diagnostic]:
    """Return every diagnostic the rules report for *fragments*, rule by rule."""
    return [diag for rule in ALL_RULES for diag in rule(fragments)]


def validate_recipe(recipe: Recipe) -> list[Diagnostic]:
    """Validate every selector of *recipe*, tagging diagnostics with its index."""
    diagnostics: list[Diagnostic] = []
    for index, selector in enumerate(recipe.selectors()):
        diagnostics.extend(
            dataclasses.replace(diag, operand=index)
            for diag in validate(selector.fragments)
        )
    return diagnostics
