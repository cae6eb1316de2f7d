"""Selector builder error types."""

from __future__ import annotations

from typing import Any

from selectorkit.category import Category


class SelectorError(Exception):
    """Base error for fragments the builder refuses to append."""

    def __init__(
        self,
        message: str,
        *,
        category: Category | None = None,
        previous: Category | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category
        self.previous = previous


class OrderError(SelectorError):
    """A fragment was appended after a fragment of a higher-ranked category."""

    def __init__(self, category: Category, previous: Category | None) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            category=category,
            previous=previous,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.category, self.previous))


class DuplicateError(SelectorError):
    """A once-only fragment (element, id, pseudo-element) was appended twice."""

    def __init__(self, category: Category) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more than one time "
            "inside the selector",
            category=category,
            previous=category,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.category,))
