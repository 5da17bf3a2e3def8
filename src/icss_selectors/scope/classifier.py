"""Classify selector nodes by the role they play in scope resolution."""

from __future__ import annotations

from enum import Enum

from icss_selectors.config import Mode
from icss_selectors.selector.model import NodeType, SelectorNode

__all__ = ["Kind", "classify", "is_scopable", "override_mode"]


class Kind(Enum):
    CLASS = "class"
    ID = "id"
    TAG = "tag"
    ATTRIBUTE = "attribute"
    UNIVERSAL = "universal"
    COMBINATOR = "combinator"
    COMMENT = "comment"
    SPACING = "spacing"
    NARROW_SCOPE = "narrow-scope"
    BROAD_SCOPE = "broad-scope"
    FUNCTIONAL_PSEUDO = "functional-pseudo"
    PLAIN_PSEUDO = "plain-pseudo"


_SCOPE_NAMES = frozenset(m.value for m in Mode)

_BY_TYPE = {
    NodeType.CLASS: Kind.CLASS,
    NodeType.ID: Kind.ID,
    NodeType.ELEMENT: Kind.TAG,
    NodeType.ATTRIBUTE: Kind.ATTRIBUTE,
    NodeType.UNIVERSAL: Kind.UNIVERSAL,
    NodeType.COMBINATOR: Kind.COMBINATOR,
    NodeType.COMMENT: Kind.COMMENT,
    NodeType.SPACING: Kind.SPACING,
    NodeType.PSEUDO_ELEMENT: Kind.PLAIN_PSEUDO,
}


def classify(node: SelectorNode) -> Kind:
    """Return the scoping role of *node*."""
    if node.type is NodeType.NESTED_PSEUDO_CLASS:
        if node.value.lower() in _SCOPE_NAMES:
            return Kind.NARROW_SCOPE
        return Kind.FUNCTIONAL_PSEUDO
    if node.type is NodeType.PSEUDO_CLASS:
        if node.argument is None and node.value.lower() in _SCOPE_NAMES:
            return Kind.BROAD_SCOPE
        return Kind.PLAIN_PSEUDO
    return _BY_TYPE[node.type]


def is_scopable(kind: Kind) -> bool:
    """Only classes and ids are ever renamed."""
    return kind in (Kind.CLASS, Kind.ID)


def override_mode(node: SelectorNode) -> Mode:
    """Mode named by a :local/:global override node."""
    return Mode(node.value.lower())
