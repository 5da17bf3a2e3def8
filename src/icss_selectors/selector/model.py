"""Selector node model produced by the tokenizer and consumed by the resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NodeType(Enum):
    """Token-level shape of a selector node."""

    CLASS = "class"
    ID = "id"
    ELEMENT = "element"
    UNIVERSAL = "universal"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    NESTED_PSEUDO_CLASS = "nested-pseudo-class"
    COMBINATOR = "combinator"
    SPACING = "spacing"
    COMMENT = "comment"


@dataclass(frozen=True)
class SelectorNode:
    """One node of a selector.

    Attributes:
        type: Token-level shape of the node.
        value: Name without its sigil (``foo`` for ``.foo``, ``not`` for
            ``:not(...)``), the raw text for attributes, comments and
            spacing, or the operator for combinators.
        argument: Raw parenthesised argument of a pseudo-class such as
            ``:nth-child(2n+1)``; ``None`` when there are no parentheses.
        nodes: Argument of a nested pseudo-class, itself a selector list.
        before: Whitespace before a combinator.
        after: Whitespace after a combinator.
    """

    type: NodeType
    value: str = ""
    argument: str | None = None
    nodes: SelectorList | None = None
    before: str = ""
    after: str = ""


@dataclass(frozen=True)
class Selector:
    """A single comma-branch; whitespace around the branch lives on it."""

    nodes: tuple[SelectorNode, ...] = ()
    before: str = ""
    after: str = ""


@dataclass(frozen=True)
class SelectorList:
    """Comma-separated selectors in document order."""

    selectors: tuple[Selector, ...] = ()

    def __len__(self) -> int:
        return len(self.selectors)

    def __iter__(self):
        return iter(self.selectors)


def local_marker(node: SelectorNode) -> SelectorNode:
    """Wrap *node* in ``:local(...)``."""
    return SelectorNode(
        type=NodeType.NESTED_PSEUDO_CLASS,
        value="local",
        nodes=SelectorList((Selector(nodes=(node,)),)),
    )
