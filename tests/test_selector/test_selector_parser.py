"""Tests for the selector tokenizer and stringifier."""

import pytest

from icss_selectors.errors import SelectorParseError
from icss_selectors.selector import (
    NodeType,
    Selector,
    SelectorList,
    SelectorNode,
    parse_selector_list,
    stringify,
)


def _types(selector: Selector) -> list[NodeType]:
    return [n.type for n in selector.nodes]


# ---------------------------------------------------------------------------
# Simple selectors
# ---------------------------------------------------------------------------


class TestSimpleSelectors:
    def test_class(self):
        result = parse_selector_list(".foo")
        assert result == SelectorList(
            (Selector(nodes=(SelectorNode(NodeType.CLASS, value="foo"),)),)
        )

    def test_id(self):
        (sel,) = parse_selector_list("#bar").selectors
        assert sel.nodes == (SelectorNode(NodeType.ID, value="bar"),)

    def test_element_and_universal(self):
        (sel,) = parse_selector_list("input *").selectors
        assert _types(sel) == [NodeType.ELEMENT, NodeType.SPACING, NodeType.UNIVERSAL]

    def test_attribute_keeps_raw_text(self):
        (sel,) = parse_selector_list('[type="radio"]').selectors
        assert sel.nodes == (SelectorNode(NodeType.ATTRIBUTE, value='[type="radio"]'),)

    def test_compound(self):
        (sel,) = parse_selector_list("a.b#c").selectors
        assert _types(sel) == [NodeType.ELEMENT, NodeType.CLASS, NodeType.ID]


# ---------------------------------------------------------------------------
# Pseudos
# ---------------------------------------------------------------------------


class TestPseudos:
    def test_pseudo_class(self):
        (sel,) = parse_selector_list(".foo:hover").selectors
        assert sel.nodes[1] == SelectorNode(NodeType.PSEUDO_CLASS, value="hover")

    def test_pseudo_element(self):
        (sel,) = parse_selector_list(".foo::after").selectors
        assert sel.nodes[1] == SelectorNode(NodeType.PSEUDO_ELEMENT, value="after")

    def test_broad_override_is_plain_pseudo_class(self):
        (sel,) = parse_selector_list(":global .foo").selectors
        assert sel.nodes[0] == SelectorNode(NodeType.PSEUDO_CLASS, value="global")

    def test_nested_pseudo_class(self):
        (sel,) = parse_selector_list(":not(.foo, .bar)").selectors
        node = sel.nodes[0]
        assert node.type is NodeType.NESTED_PSEUDO_CLASS
        assert node.value == "not"
        assert len(node.nodes) == 2

    def test_narrow_override_is_nested(self):
        (sel,) = parse_selector_list(":local(.foo)").selectors
        assert sel.nodes[0].type is NodeType.NESTED_PSEUDO_CLASS
        assert sel.nodes[0].value == "local"

    def test_pseudo_with_raw_argument(self):
        (sel,) = parse_selector_list("li:nth-child(2n + 1)").selectors
        node = sel.nodes[1]
        assert node.type is NodeType.PSEUDO_CLASS
        assert node.value == "nth-child"
        assert node.argument == "2n + 1"


# ---------------------------------------------------------------------------
# Whitespace, combinators and branches
# ---------------------------------------------------------------------------


class TestStructure:
    def test_combinator_keeps_whitespace(self):
        (sel,) = parse_selector_list(".a  >.b").selectors
        node = sel.nodes[1]
        assert node.type is NodeType.COMBINATOR
        assert (node.before, node.value, node.after) == ("  ", ">", "")

    def test_descendant_spacing(self):
        (sel,) = parse_selector_list(".a .b").selectors
        assert _types(sel) == [NodeType.CLASS, NodeType.SPACING, NodeType.CLASS]

    def test_branch_whitespace_moves_to_selector(self):
        result = parse_selector_list(".a , .b")
        first, second = result.selectors
        assert first.after == " "
        assert second.before == " "
        assert _types(first) == [NodeType.CLASS]

    def test_comment(self):
        (sel,) = parse_selector_list(".a/* x */.b").selectors
        assert sel.nodes[1] == SelectorNode(NodeType.COMMENT, value="/* x */")


class TestRoundTrip:
    @pytest.mark.parametrize(
        "source",
        [
            ".foo",
            ".foo, .baz",
            ".foo ~ .baz",
            ".a > .b + .c",
            ":global(.foo .bar)",
            ":local( .a ).b",
            ".foo:not(:global .bar).foobar",
            '[type="radio"] ~ .label',
            "li:nth-child(2n+1)::before",
            "  .a ,\n.b  ",
        ],
    )
    def test_stringify_is_lossless(self, source):
        assert stringify(parse_selector_list(source)) == source


class TestErrors:
    def test_invalid_character(self):
        with pytest.raises(SelectorParseError):
            parse_selector_list(".foo { }")

    def test_unbalanced_parenthesis(self):
        with pytest.raises(SelectorParseError):
            parse_selector_list(":not(.foo")
