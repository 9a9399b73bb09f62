"""CLI command: selectorkit check -- parse and validate selector text."""

from __future__ import annotations

import sys

import click

from selectorkit.parser import parse_selector
from selectorkit.selector import SelectorError


@click.command()
@click.argument("selector")
def check(selector: str) -> None:
    """Parse SELECTOR, validate fragment order, and print it normalized.

    Exits with code 0 if the selector is valid, or code 1 otherwise.
    """
    try:
        parsed = parse_selector(selector)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    click.echo(parsed.stringify())
