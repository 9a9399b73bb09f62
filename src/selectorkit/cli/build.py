"""CLI command: selectorkit build -- assemble one simple selector from options."""

from __future__ import annotations

import sys

import click

from selectorkit.selector import SelectorError, SimpleSelector


@click.command()
@click.option("--element", "element", default=None, help="Element (type) name")
@click.option("--id", "id_", default=None, help="Id, without '#'")
@click.option("--class", "classes", multiple=True, help="Class name, repeatable")
@click.option("--attr", "attrs", multiple=True, help="Attribute body, repeatable")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class, repeatable"
)
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector and print it.

    Fragments are always emitted in canonical order: element, id, classes,
    attributes, pseudo-classes, pseudo-element.
    """
    selector = SimpleSelector()
    try:
        if element:
            selector = selector.element(element)
        if id_:
            selector = selector.id(id_)
        for value in classes:
            selector = selector.class_(value)
        for value in attrs:
            selector = selector.attr(value)
        for value in pseudo_classes:
            selector = selector.pseudo_class(value)
        if pseudo_element:
            selector = selector.pseudo_element(pseudo_element)
    except SelectorError as exc:
        click.echo(f"Invalid selector: {exc}", err=True)
        sys.exit(1)

    if selector.is_empty:
        click.echo("Nothing to build: pass at least one fragment option", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
