"""Shared recipe loading for CLI commands."""

from __future__ import annotations

import sys

import click

from cssbuilder.recipe import Recipe, RecipeError, parse_recipe


def load_recipe(source: str) -> Recipe:
    """Parse *source* (or stdin when it is ``-``), exiting with code 1 on errors."""
    if source == "-":
        source = sys.stdin.read()
    try:
        return parse_recipe(source)
    except RecipeError as exc:
        click.echo(f"Recipe error: {exc}", err=True)
        sys.exit(1)
