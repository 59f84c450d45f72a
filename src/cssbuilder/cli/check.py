"""CLI command: cssbuilder check -- report every grammar problem in a recipe."""

from __future__ import annotations

import sys

import click

from cssbuilder.cli._source import load_recipe
from cssbuilder.model.diagnostic import Severity
from cssbuilder.validation import validate_recipe


@click.command()
@click.argument("recipe")
def check(recipe: str) -> None:
    """Validate every selector in RECIPE.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    parsed = load_recipe(recipe)
    diagnostics = validate_recipe(parsed)

    if not diagnostics:
        count = len(list(parsed.selectors()))
        click.echo(f"OK: {count} selector(s) are valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))
        if diag.fix:
            click.echo(f"  fix: {diag.fix}")

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
