"""Stateless entry points: each call starts a fresh :class:`Selector`.

    from selectorkit import facade as css

    css.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'
"""

from __future__ import annotations

from selectorkit.selector import Selector

__all__ = [
    "element",
    "id",
    "class_",
    "attr",
    "pseudo_class",
    "pseudo_element",
    "combine",
]


def element(value: str) -> Selector:
    return Selector().element(value)


def id(value: str) -> Selector:  # noqa: A001
    return Selector().id(value)


def class_(value: str) -> Selector:
    return Selector().class_(value)


def attr(value: str) -> Selector:
    return Selector().attr(value)


def pseudo_class(value: str) -> Selector:
    return Selector().pseudo_class(value)


def pseudo_element(value: str) -> Selector:
    return Selector().pseudo_element(value)


def combine(first: Selector, combinator: str, second: Selector) -> Selector:
    return Selector().combine(first, combinator, second)
