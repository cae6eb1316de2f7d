"""CLI command: selectorkit area -- rectangle area, optionally as JSON."""

from __future__ import annotations

from dataclasses import asdict

import click

from selectorkit.serialization import to_json
from selectorkit.shapes import Rectangle


def _number(value: float) -> int | float:
    return int(value) if value.is_integer() else value


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle and its area as JSON.")
def area(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=_number(width), height=_number(height))
    if as_json:
        click.echo(to_json({**asdict(rect), "area": _number(float(rect.area()))}))
    else:
        click.echo(_number(float(rect.area())))
