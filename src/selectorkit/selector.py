"""Fluent builder that renders a CSS selector one fragment at a time.

Usage::

    Selector().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

Fragments must be appended in ascending :class:`Category` order.  Class,
attribute and pseudo-class fragments may repeat; element, id and
pseudo-element may appear once.  Violations raise immediately.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selectorkit.category import Category
from selectorkit.errors import DuplicateError, OrderError

__all__ = ["COMBINATORS", "Selector"]

logger = logging.getLogger("selectorkit")

# Descendant, next-sibling, subsequent-sibling, child.
COMBINATORS: tuple[str, ...] = (" ", "+", "~", ">")


@dataclass
class Selector:
    """A compound (or combined) selector under construction.

    Attributes:
        rendered: The selector text accumulated so far.
        last_category: Category of the most recently appended fragment, or
            ``None`` when nothing has been appended (or after :meth:`combine`).
    """

    rendered: str = ""
    last_category: Category | None = None

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> Selector:
        return self.append(Category.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self.append(Category.ID, value)

    def class_(self, value: str) -> Selector:
        return self.append(Category.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self.append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self.append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self.append(Category.PSEUDO_ELEMENT, value)

    def append(self, category: Category, value: str) -> Selector:
        """Validate and append one fragment of *category*, returning ``self``."""
        self._check(category)
        fragment = category.render(value)
        self.rendered += fragment
        self.last_category = category
        logger.debug("Appended %s fragment %r -> %r", category.label, fragment, self.rendered)
        return self

    def _check(self, category: Category) -> None:
        previous = Category.rank_of(self.last_category)
        if previous > category.rank:
            logger.debug(
                "Rejected %s after %s: out of order",
                category.label,
                self.last_category.label if self.last_category else "nothing",
            )
            raise OrderError(category, self.last_category)
        if previous == category.rank and not category.repeatable:
            logger.debug("Rejected second %s fragment", category.label)
            raise DuplicateError(category)

    # --- combination ----------------------------------------------------------

    @classmethod
    def combine(cls, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with *combinator* into a new selector.

        The result owns a fresh string and starts a new ordering context, so
        fragments may be appended to it from any category.  The combinator is
        inserted verbatim between single spaces and is never validated.
        """
        combined = cls(rendered=f"{first.rendered} {combinator} {second.rendered}")
        logger.debug("Combined %r %r %r", first.rendered, combinator, second.rendered)
        return combined

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        return self.rendered

    def __str__(self) -> str:
        return self.rendered
