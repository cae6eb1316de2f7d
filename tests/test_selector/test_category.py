"""Tests for fragment categories."""

import pytest

from selectorkit.category import Category


class TestRanks:
    def test_declared_in_rank_order(self):
        assert [c.rank for c in Category] == [1, 2, 3, 4, 5, 6]

    def test_ordering_follows_rank(self):
        assert Category.ELEMENT < Category.ID < Category.CLASS
        assert Category.PSEUDO_ELEMENT > Category.PSEUDO_CLASS
        assert sorted([Category.ATTRIBUTE, Category.ELEMENT, Category.CLASS]) == [
            Category.ELEMENT,
            Category.CLASS,
            Category.ATTRIBUTE,
        ]

    def test_none_ranks_below_everything(self):
        assert Category.rank_of(None) == 0
        assert all(Category.rank_of(None) < c.rank for c in Category)

    def test_compare_with_non_category(self):
        with pytest.raises(TypeError):
            Category.ELEMENT < 1  # noqa: B015


class TestRepeatable:
    @pytest.mark.parametrize(
        "category", [Category.CLASS, Category.ATTRIBUTE, Category.PSEUDO_CLASS]
    )
    def test_repeatable(self, category: Category):
        assert category.repeatable

    @pytest.mark.parametrize(
        "category", [Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT]
    )
    def test_once_only(self, category: Category):
        assert not category.repeatable


class TestRender:
    @pytest.mark.parametrize(
        "category, expected",
        [
            (Category.ELEMENT, "div"),
            (Category.ID, "#div"),
            (Category.CLASS, ".div"),
            (Category.ATTRIBUTE, "[div]"),
            (Category.PSEUDO_CLASS, ":div"),
            (Category.PSEUDO_ELEMENT, "::div"),
        ],
    )
    def test_render(self, category: Category, expected: str):
        assert category.render("div") == expected

    def test_render_is_verbatim(self):
        assert Category.ATTRIBUTE.render('href$=".png"') == '[href$=".png"]'
        assert Category.PSEUDO_CLASS.render("nth-of-type(even)") == ":nth-of-type(even)"

    def test_label(self):
        assert Category.PSEUDO_ELEMENT.label == "pseudo-element"
        assert Category.ID.label == "id"
