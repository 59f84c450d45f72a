"""CLI command: cssbuilder inspect -- display the fragments of a recipe."""

from __future__ import annotations

import click

from cssbuilder.cli._source import load_recipe
from cssbuilder.recipe import CombinedRecipe, Recipe


def _combinators(recipe: Recipe) -> list[str]:
    """Combinator labels between consecutive selectors, flattened left to right."""
    if not isinstance(recipe, CombinedRecipe):
        return []
    names: list[str] = []
    for i, operand in enumerate(recipe.operands):
        if i > 0:
            names.append(recipe.combinators[i - 1].label)
        names.extend(_combinators(operand))
    return names


@click.command()
@click.argument("recipe")
def inspect(recipe: str) -> None:
    """Parse RECIPE and list its selectors and fragments.

    Shows each fragment's kind, rank and rendered form, and the combinators
    joining the selectors. Grammar rules are not applied; use check for that.
    """
    parsed = load_recipe(recipe)
    selectors = list(parsed.selectors())
    combinators = _combinators(parsed)

    click.echo(f"Selectors: {len(selectors)}")
    for index, selector in enumerate(selectors):
        if index > 0:
            click.echo(f"  -- {combinators[index - 1]} --")
        click.echo(f"Selector {index}:")
        for position, fragment in enumerate(selector.fragments):
            click.echo(
                f"  {position}  {fragment.kind.value:<15} rank={fragment.rank}  {fragment.render()}"
            )
