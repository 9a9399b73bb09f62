"""CLI commands for the rectangle and JSON helpers: area, encode, decode."""

from __future__ import annotations

import sys
from dataclasses import fields

import click

from selectorkit.codec import ParseError, ShapeError, from_json, to_json
from selectorkit.config import SelectorkitConfig
from selectorkit.shapes import Rectangle

SHAPES: dict[str, type] = {
    "rectangle": Rectangle,
}


def _format_number(value: float) -> str:
    """Render a number exactly, dropping a zero fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    click.echo(_format_number(Rectangle(width, height).get_area()))


@click.command()
@click.argument("json_text")
@click.option("--indent", default=None, type=int, help="Indent width for pretty output")
@click.option("--sort-keys/--no-sort-keys", default=False, help="Sort object keys")
@click.pass_obj
def encode(
    config: SelectorkitConfig | None, json_text: str, indent: int | None, sort_keys: bool
) -> None:
    """Re-encode JSON_TEXT (compact by default)."""
    base = config or SelectorkitConfig()
    cfg = SelectorkitConfig(
        json_indent=indent, sort_keys=sort_keys, log_level=base.log_level
    )
    try:
        value = from_json(object, json_text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    try:
        click.echo(to_json(value, cfg))
    except ValueError as exc:
        click.echo(f"Encode error: {exc}", err=True)
        sys.exit(1)


@click.command()
@click.argument("json_text")
@click.option(
    "--shape",
    type=click.Choice(sorted(SHAPES)),
    default="rectangle",
    help="Shape to decode into",
)
def decode(json_text: str, shape: str) -> None:
    """Decode JSON_TEXT into a shape and describe the result."""
    cls = SHAPES[shape]
    try:
        value = from_json(cls, json_text)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except ShapeError as exc:
        click.echo(f"Invalid shape: {exc}", err=True)
        sys.exit(1)

    names = [f.name for f in fields(cls)]
    missing = [name for name in names if not hasattr(value, name)]
    if missing:
        click.echo(f"Missing field(s): {', '.join(missing)}", err=True)
        sys.exit(1)

    non_numeric = [name for name in names if not _is_number(getattr(value, name))]
    if non_numeric:
        click.echo(f"Non-numeric field(s): {', '.join(non_numeric)}", err=True)
        sys.exit(1)

    click.echo(repr(value))
    click.echo(f"area={_format_number(value.get_area())}")
