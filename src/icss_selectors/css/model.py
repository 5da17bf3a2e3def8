"""CSS document model: Root, Rule, AtRule, Declaration and Comment.

Every node keeps the raw whitespace around it so that a parsed document
stringifies back to the exact source text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Declaration:
    prop: str
    value: str
    before: str = ""
    between: str = ": "  # colon plus surrounding whitespace
    semicolon: str = ";"


@dataclass
class Comment:
    text: str  # without the /* */ delimiters
    before: str = ""


@dataclass
class Rule:
    """A selector with a block of child nodes.

    ``nodes`` is ``None`` for a rule without a body.
    """

    selector: str
    nodes: list[CssNode] | None = field(default_factory=list)
    before: str = ""
    between: str = " "
    after: str = ""


@dataclass
class AtRule:
    """An ``@name params`` statement, with a block or terminated by ``;``."""

    name: str
    params: str = ""
    nodes: list[CssNode] | None = None
    before: str = ""
    after_name: str = ""
    between: str = ""
    after: str = ""
    semicolon: str = ";"


@dataclass
class Root:
    nodes: list[CssNode] = field(default_factory=list)
    after: str = ""


CssNode = Union[Declaration, Comment, Rule, AtRule]


def walk_rules(
    container: Root | Rule | AtRule,
) -> Iterator[tuple[Rule, Root | Rule | AtRule]]:
    """Yield ``(rule, parent)`` for every rule below *container*, pre-order."""
    for node in container.nodes or ():
        if isinstance(node, Rule):
            yield node, container
            yield from walk_rules(node)
        elif isinstance(node, AtRule):
            yield from walk_rules(node)
