"""Tests for the selector node classifier."""

import pytest

from icss_selectors.scope import Kind, classify, is_scopable
from icss_selectors.selector import parse_selector_list


def _first(source: str):
    return parse_selector_list(source).selectors[0].nodes[0]


class TestClassify:
    @pytest.mark.parametrize(
        "source, kind",
        [
            (".foo", Kind.CLASS),
            ("#foo", Kind.ID),
            ("input", Kind.TAG),
            ('[type="radio"]', Kind.ATTRIBUTE),
            ("*", Kind.UNIVERSAL),
            ("/* c */", Kind.COMMENT),
            (":hover", Kind.PLAIN_PSEUDO),
            ("::after", Kind.PLAIN_PSEUDO),
            (":nth-child(2)", Kind.PLAIN_PSEUDO),
            (":not(.a)", Kind.FUNCTIONAL_PSEUDO),
            (":local", Kind.BROAD_SCOPE),
            (":global", Kind.BROAD_SCOPE),
            (":local(.a)", Kind.NARROW_SCOPE),
            (":global(.a)", Kind.NARROW_SCOPE),
        ],
    )
    def test_first_node(self, source, kind):
        assert classify(_first(source)) is kind

    def test_combinator_and_spacing(self):
        nodes = parse_selector_list(".a > .b .c").selectors[0].nodes
        assert [classify(n) for n in nodes] == [
            Kind.CLASS,
            Kind.COMBINATOR,
            Kind.CLASS,
            Kind.SPACING,
            Kind.CLASS,
        ]

    def test_override_names_are_case_insensitive(self):
        assert classify(_first(":GLOBAL(.a)")) is Kind.NARROW_SCOPE
        assert classify(_first(":Local")) is Kind.BROAD_SCOPE


class TestIsScopable:
    def test_only_class_and_id(self):
        scopable = {k for k in Kind if is_scopable(k)}
        assert scopable == {Kind.CLASS, Kind.ID}
