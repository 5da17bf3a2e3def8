"""Lark-based tokenizer that turns selector text into a SelectorList."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from icss_selectors.errors import SelectorParseError
from icss_selectors.selector.model import (
    NodeType,
    Selector,
    SelectorList,
    SelectorNode,
)

__all__ = ["parse_selector_list"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class SelectorTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into selector model objects."""

    # ---- simple selectors ----

    def class_name(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.CLASS, value=str(items[0]))

    def id_name(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.ID, value=str(items[0]))

    def element(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.ELEMENT, value=str(items[0]))

    def universal(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.UNIVERSAL, value="*")

    def attribute(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.ATTRIBUTE, value=str(items[0]))

    # ---- pseudos ----

    def pseudo_class(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.PSEUDO_CLASS, value=str(items[0]))

    def pseudo_element(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.PSEUDO_ELEMENT, value=str(items[0]))

    def pseudo_call(self, items: list[Token]) -> SelectorNode:
        opener = str(items[0])
        argument = str(items[1]) if len(items) > 1 else ""
        if opener.startswith("::"):
            return SelectorNode(
                NodeType.PSEUDO_ELEMENT, value=opener[2:-1], argument=argument
            )
        return SelectorNode(
            NodeType.PSEUDO_CLASS, value=opener[1:-1], argument=argument
        )

    def nested_pseudo_class(self, items: list[object]) -> SelectorNode:
        opener = str(items[0])
        return SelectorNode(
            NodeType.NESTED_PSEUDO_CLASS,
            value=opener[1:-1],
            nodes=items[1],  # type: ignore[arg-type]
        )

    # ---- separators ----

    def spacing(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.SPACING, value=str(items[0]))

    def comment(self, items: list[Token]) -> SelectorNode:
        return SelectorNode(NodeType.COMMENT, value=str(items[0]))

    def combinator(self, items: list[Token]) -> SelectorNode:
        raw = str(items[0])
        operator = raw.strip()
        start = raw.index(operator)
        return SelectorNode(
            NodeType.COMBINATOR,
            value=operator,
            before=raw[:start],
            after=raw[start + len(operator):],
        )

    # ---- structure ----

    def selector(self, items: list[SelectorNode]) -> Selector:
        nodes = list(items)
        before = ""
        after = ""
        if nodes and nodes[0].type is NodeType.SPACING:
            before = nodes.pop(0).value
        if nodes and nodes[-1].type is NodeType.SPACING:
            after = nodes.pop().value
        return Selector(nodes=tuple(nodes), before=before, after=after)

    def selector_list(self, items: list[Selector]) -> SelectorList:
        return SelectorList(tuple(items))

    def start(self, items: list[SelectorList]) -> SelectorList:
        return items[0]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def parse_selector_list(source: str) -> SelectorList:
    """Parse comma-separated selector text into a SelectorList.

    Whitespace is preserved on the nodes and branches so that
    ``stringify(parse_selector_list(text)) == text``.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise SelectorParseError(
            f"Invalid selector {source!r}: {e}", line=line, column=column
        ) from e
    return SelectorTransformer().transform(tree)
