"""Tests for the stateless selector entry points."""

import pytest

from selectorkit import DuplicateError, OrderError, Selector
from selectorkit import facade as css


class TestEntryPoints:
    @pytest.mark.parametrize(
        "entry, expected",
        [
            (css.element, "x"),
            (css.id, "#x"),
            (css.class_, ".x"),
            (css.attr, "[x]"),
            (css.pseudo_class, ":x"),
            (css.pseudo_element, "::x"),
        ],
    )
    def test_each_entry_point(self, entry, expected):
        sel = entry("x")
        assert isinstance(sel, Selector)
        assert sel.stringify() == expected

    def test_calls_are_independent(self):
        first = css.element("div")
        second = css.element("span")
        assert first is not second
        assert first.stringify() == "div"
        assert second.stringify() == "span"


class TestExamples:
    def test_id_class_class(self):
        assert (
            css.id("main").class_("container").class_("editable").stringify()
            == "#main.container.editable"
        )

    def test_element_attr_pseudo_class(self):
        assert (
            css.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
            == 'a[href$=".png"]:focus'
        )

    def test_combine(self):
        result = css.combine(
            css.element("div").id("main"), "+", css.element("table").id("data")
        )
        assert result.stringify() == "div#main + table#data"

    def test_combine_matches_parts(self):
        a = css.element("ul").class_("menu")
        b = css.element("li").pseudo_class("first-child")
        assert css.combine(a, ">", b).stringify() == (
            a.stringify() + " > " + b.stringify()
        )

    def test_nested_combine(self):
        result = css.combine(
            css.element("p"),
            "~",
            css.combine(css.class_("a"), " ", css.pseudo_element("marker")),
        )
        assert result.stringify() == "p ~ .a   ::marker"

    def test_element_twice(self):
        with pytest.raises(DuplicateError):
            css.element("div").element("span")

    def test_element_after_class(self):
        with pytest.raises(OrderError):
            css.class_("a").element("div")

    def test_pseudo_element_after_pseudo_element(self):
        with pytest.raises(DuplicateError):
            css.pseudo_element("a").pseudo_element("b")
