"""CLI command: selectorkit build -- render a selector from ordered parts."""

from __future__ import annotations

import sys

import click

from selectorkit.category import Category
from selectorkit.config import SelectorkitConfig
from selectorkit.errors import SelectorError
from selectorkit.selector import Selector

# Accepted spellings for each fragment kind on the command line.
_KINDS: dict[str, Category] = {
    "element": Category.ELEMENT,
    "e": Category.ELEMENT,
    "id": Category.ID,
    "i": Category.ID,
    "class": Category.CLASS,
    "c": Category.CLASS,
    "attr": Category.ATTRIBUTE,
    "attribute": Category.ATTRIBUTE,
    "a": Category.ATTRIBUTE,
    "pseudo-class": Category.PSEUDO_CLASS,
    "pc": Category.PSEUDO_CLASS,
    "pseudo-element": Category.PSEUDO_ELEMENT,
    "pe": Category.PSEUDO_ELEMENT,
}

# A literal space is awkward to pass through a shell.
_DESCENDANT = "descendant"


def _combinator_for(part: str, config: SelectorkitConfig) -> str | None:
    if part == _DESCENDANT:
        return " "
    if part in config.combinators:
        return part
    return None


def build_selector(parts: list[str] | tuple[str, ...], config: SelectorkitConfig) -> Selector:
    """Apply *parts* in order and fold combined segments left to right.

    Raises:
        click.UsageError: a part is malformed or a combinator is misplaced.
        SelectorError: the fragments violate ordering or duplicate rules.
    """
    segments: list[Selector] = []
    combinators: list[str] = []
    current: Selector | None = None

    for part in parts:
        combinator = _combinator_for(part, config)
        if combinator is not None:
            if current is None:
                raise click.UsageError(f"Combinator {part!r} must follow a selector")
            segments.append(current)
            combinators.append(combinator)
            current = None
            continue

        kind, sep, value = part.partition("=")
        if not sep:
            raise click.UsageError(f"Expected KIND=VALUE or a combinator, got {part!r}")
        category = _KINDS.get(kind.strip().lower())
        if category is None:
            known = ", ".join(c.label for c in Category)
            raise click.UsageError(f"Unknown selector kind {kind!r} (expected one of: {known})")
        if current is None:
            current = Selector()
        current.append(category, value)

    if current is None:
        raise click.UsageError("Nothing to build" if not segments else "Trailing combinator")
    segments.append(current)

    result = segments[0]
    for combinator, segment in zip(combinators, segments[1:]):
        result = Selector.combine(result, combinator, segment)
    return result


@click.command()
@click.argument("parts", nargs=-1, required=True)
@click.pass_obj
def build(config: SelectorkitConfig | None, parts: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE parts and combinators.

    KIND is one of element, id, class, attr, pseudo-class, pseudo-element
    (or e, i, c, a, pc, pe).  Parts must follow that order inside each
    compound selector.  Separate compound selectors with +, ~, > or
    "descendant".

    Example: selectorkit build e=div i=main + e=table c=data
    """
    config = config or SelectorkitConfig()
    try:
        selector = build_selector(parts, config)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(selector.stringify())
