"""CLI command: cssbuilder build -- print the selector a recipe produces."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli._source import load_recipe
from cssbuilder.recipe import build_recipe
from cssbuilder.selector.errors import SelectorError


@click.command()
@click.argument("recipe")
def build(recipe: str) -> None:
    """Build the selector described by RECIPE and print it.

    RECIPE is a chain of builder calls such as
    "element(div).id(main) + element(table)"; pass - to read it from stdin.
    Exits with code 1 if the recipe breaks the selector grammar.
    """
    parsed = load_recipe(recipe)
    try:
        selector = build_recipe(parsed)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.serialize())
