"""Tests for CompoundSelector and ComplexSelector."""

import logging

import pytest

from selectorkit.errors import ORDER_ERROR, UNIQUE_ERROR, OrderError, UniqueError
from selectorkit.model import Combinator, ComplexSelector, CompoundSelector, PartKind


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


class TestCompoundRendering:
    def test_empty_selector_renders_empty_string(self):
        assert CompoundSelector().stringify() == ""

    def test_all_parts_in_order(self):
        sel = (
            CompoundSelector()
            .element("a")
            .id("nav")
            .class_("link")
            .attr("href")
            .pseudo_class("hover")
            .pseudo_element("before")
        )
        assert sel.stringify() == "a#nav.link[href]:hover::before"

    def test_classes_keep_call_order(self):
        sel = CompoundSelector().class_("b").class_("a").class_("c")
        assert sel.stringify() == ".b.a.c"

    def test_repeated_class_is_kept(self):
        sel = CompoundSelector().class_("x").class_("x")
        assert sel.stringify() == ".x.x"

    def test_attributes_and_pseudo_classes_accumulate(self):
        sel = (
            CompoundSelector()
            .attr("type=text")
            .attr("required")
            .pseudo_class("focus")
            .pseudo_class("nth-child(2n)")
        )
        assert sel.stringify() == "[type=text][required]:focus:nth-child(2n)"

    def test_str_matches_stringify(self):
        sel = CompoundSelector().element("p").class_("lead")
        assert str(sel) == sel.stringify() == "p.lead"

    def test_stringify_is_idempotent(self):
        sel = CompoundSelector().element("ul").class_("menu")
        assert sel.stringify() == sel.stringify()

    def test_repr_shows_css(self):
        assert repr(CompoundSelector().id("x")) == "CompoundSelector('#x')"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class TestOrdering:
    def test_id_then_element_raises(self):
        sel = CompoundSelector().id("x")
        with pytest.raises(OrderError):
            sel.element("a")

    def test_order_error_message(self):
        sel = CompoundSelector().class_("x")
        with pytest.raises(OrderError) as exc_info:
            sel.id("main")
        assert str(exc_info.value) == ORDER_ERROR

    @pytest.mark.parametrize(
        "later, earlier",
        [
            (PartKind.ID, PartKind.ELEMENT),
            (PartKind.CLASS, PartKind.ID),
            (PartKind.ATTR, PartKind.CLASS),
            (PartKind.PSEUDO_CLASS, PartKind.ATTR),
            (PartKind.PSEUDO_ELEMENT, PartKind.PSEUDO_CLASS),
            (PartKind.PSEUDO_ELEMENT, PartKind.ELEMENT),
        ],
    )
    def test_lower_rank_after_higher_rank_raises(self, later, earlier):
        sel = CompoundSelector().add(later, "v")
        with pytest.raises(OrderError):
            sel.add(earlier, "w")

    def test_failed_call_leaves_selector_unchanged(self):
        sel = CompoundSelector().element("div").class_("box")
        with pytest.raises(OrderError):
            sel.id("main")
        assert sel.stringify() == "div.box"
        assert sel.rank == PartKind.CLASS.rank

    def test_can_continue_after_order_error(self):
        sel = CompoundSelector().class_("box")
        with pytest.raises(OrderError):
            sel.element("div")
        sel.pseudo_class("hover")
        assert sel.stringify() == ".box:hover"

    def test_skipping_categories_is_allowed(self):
        sel = CompoundSelector().element("input").pseudo_class("checked")
        assert sel.stringify() == "input:checked"

    def test_rank_tracks_latest_category(self):
        sel = CompoundSelector()
        assert sel.rank == 0
        sel.element("a")
        assert sel.rank == 1
        sel.attr("href")
        assert sel.rank == 4


# ---------------------------------------------------------------------------
# Uniqueness
# ---------------------------------------------------------------------------


class TestUniqueness:
    def test_second_id_raises(self):
        sel = CompoundSelector().id("x")
        with pytest.raises(UniqueError):
            sel.id("y")

    def test_second_element_raises(self):
        sel = CompoundSelector().element("a")
        with pytest.raises(UniqueError) as exc_info:
            sel.element("b")
        assert str(exc_info.value) == UNIQUE_ERROR

    def test_second_pseudo_element_raises(self):
        sel = CompoundSelector().pseudo_element("before")
        with pytest.raises(UniqueError):
            sel.pseudo_element("after")

    def test_order_checked_before_uniqueness(self):
        sel = CompoundSelector().element("a").id("x")
        with pytest.raises(OrderError):
            sel.element("b")

    def test_failed_unique_call_keeps_first_value(self):
        sel = CompoundSelector().id("first")
        with pytest.raises(UniqueError):
            sel.id("second")
        assert sel.id_name == "first"
        assert sel.stringify() == "#first"

    def test_empty_id_still_counts_as_set(self):
        sel = CompoundSelector().id("")
        with pytest.raises(UniqueError):
            sel.id("y")
        assert sel.stringify() == "#"

    def test_empty_pseudo_element_still_counts_as_set(self):
        sel = CompoundSelector().element("p").pseudo_element("")
        assert sel.stringify() == "p::"
        with pytest.raises(UniqueError):
            sel.pseudo_element("x")

    def test_empty_element_does_not_block_later_element(self):
        sel = CompoundSelector().element("")
        sel.element("a")
        assert sel.stringify() == "a"


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


class TestAccessors:
    def test_parts_in_canonical_order(self):
        sel = CompoundSelector().element("a").class_("x").class_("y").pseudo_element("after")
        assert sel.parts() == [
            (PartKind.ELEMENT, "a"),
            (PartKind.CLASS, "x"),
            (PartKind.CLASS, "y"),
            (PartKind.PSEUDO_ELEMENT, "after"),
        ]

    def test_collections_are_read_only_copies(self):
        sel = CompoundSelector().class_("x")
        assert sel.classes == ("x",)
        assert sel.attributes == ()
        assert sel.pseudo_classes == ()
        assert sel.element_name == ""
        assert sel.pseudo_element_name == ""


# ---------------------------------------------------------------------------
# Complex selectors
# ---------------------------------------------------------------------------


class TestComplexSelector:
    def test_combinator_is_padded(self):
        left = CompoundSelector().element("div").id("main")
        right = CompoundSelector().element("span")
        assert ComplexSelector(left, "~", right).stringify() == "div#main ~ span"

    def test_descendant_combinator_renders_three_spaces(self):
        sel = ComplexSelector(
            CompoundSelector().element("ul"), " ", CompoundSelector().element("li")
        )
        assert sel.stringify() == "ul   li"

    def test_combinator_enum_renders_its_value(self):
        sel = ComplexSelector(
            CompoundSelector().element("ul"),
            Combinator.CHILD,
            CompoundSelector().element("li"),
        )
        assert sel.stringify() == "ul > li"
        assert sel.token == ">"

    def test_combinator_is_not_validated(self):
        sel = ComplexSelector(
            CompoundSelector().element("a"), "||", CompoundSelector().element("b")
        )
        assert sel.stringify() == "a || b"

    def test_is_frozen(self):
        sel = ComplexSelector(
            CompoundSelector().element("a"), "+", CompoundSelector().element("b")
        )
        with pytest.raises(AttributeError):
            sel.combinator = ">"  # type: ignore[misc]

    def test_nested_rendering(self):
        a = CompoundSelector().element("a")
        b = CompoundSelector().element("b")
        c = CompoundSelector().element("c")
        sel = ComplexSelector(ComplexSelector(a, "+", b), ">", c)
        assert sel.stringify() == "a + b > c"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


class TestLogging:
    def test_accepted_part_logged_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            CompoundSelector().element("a")
        assert "Added element 'a'" in caplog.text

    def test_rejected_part_logged_at_debug(self, caplog):
        sel = CompoundSelector().id("x")
        with caplog.at_level(logging.DEBUG, logger="selectorkit"):
            with pytest.raises(UniqueError):
                sel.id("y")
        assert "Rejected id 'y'" in caplog.text
