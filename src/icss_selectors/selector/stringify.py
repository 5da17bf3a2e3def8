"""Turn selector model objects back into selector text."""

from __future__ import annotations

from icss_selectors.selector.model import (
    NodeType,
    Selector,
    SelectorList,
    SelectorNode,
)

__all__ = ["stringify", "stringify_node", "stringify_selector"]

_SIGILS = {
    NodeType.CLASS: ".",
    NodeType.ID: "#",
    NodeType.PSEUDO_CLASS: ":",
    NodeType.PSEUDO_ELEMENT: "::",
}


def stringify_node(node: SelectorNode) -> str:
    if node.type is NodeType.NESTED_PSEUDO_CLASS:
        inner = stringify(node.nodes) if node.nodes is not None else ""
        return f":{node.value}({inner})"
    if node.type is NodeType.COMBINATOR:
        return f"{node.before}{node.value}{node.after}"
    text = _SIGILS.get(node.type, "") + node.value
    if node.argument is not None:
        text += f"({node.argument})"
    return text


def stringify_selector(selector: Selector) -> str:
    body = "".join(stringify_node(n) for n in selector.nodes)
    return f"{selector.before}{body}{selector.after}"


def stringify(selector_list: SelectorList) -> str:
    """Render a SelectorList as comma-separated selector text."""
    return ",".join(stringify_selector(s) for s in selector_list.selectors)
