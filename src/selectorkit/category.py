"""Fragment categories and the order they must appear in a compound selector."""

from __future__ import annotations

from enum import Enum


class Category(Enum):
    """Kind of a selector fragment.

    Members are declared in the required order. Each value is a tuple of
    ``(rank, repeatable, template)``:

        element#id.class[attr]:pseudo-class::pseudo-element
                  \\----/\\----/\\----------/
                  may repeat
    """

    ELEMENT = (1, False, "{}")
    ID = (2, False, "#{}")
    CLASS = (3, True, ".{}")
    ATTRIBUTE = (4, True, "[{}]")
    PSEUDO_CLASS = (5, True, ":{}")
    PSEUDO_ELEMENT = (6, False, "::{}")

    def __init__(self, rank: int, repeatable: bool, template: str) -> None:
        self.rank = rank
        self.repeatable = repeatable
        self.template = template

    @property
    def label(self) -> str:
        """Human-readable name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        return self.template.format(value)

    @staticmethod
    def rank_of(category: Category | None) -> int:
        """Rank of *category*; ``None`` (nothing appended yet) ranks below all."""
        return 0 if category is None else category.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Category):
            return NotImplemented
        return self.rank >= other.rank
