"""Render CSS document nodes back to text."""

from __future__ import annotations

from icss_selectors.css.model import AtRule, Comment, CssNode, Declaration, Root, Rule

__all__ = ["stringify_css"]


def _children(nodes: list[CssNode]) -> str:
    return "".join(stringify_css(n) for n in nodes)


def stringify_css(node: Root | CssNode) -> str:
    if isinstance(node, Root):
        return _children(node.nodes) + node.after
    if isinstance(node, Rule):
        head = f"{node.before}{node.selector}{node.between}"
        if node.nodes is None:
            return head + "{}"
        return f"{head}{{{_children(node.nodes)}{node.after}}}"
    if isinstance(node, AtRule):
        head = f"{node.before}@{node.name}{node.after_name}{node.params}{node.between}"
        if node.nodes is None:
            return head + node.semicolon
        return f"{head}{{{_children(node.nodes)}{node.after}}}"
    if isinstance(node, Declaration):
        return f"{node.before}{node.prop}{node.between}{node.value}{node.semicolon}"
    if isinstance(node, Comment):
        return f"{node.before}/*{node.text}*/"
    raise TypeError(f"Unknown CSS node: {node!r}")
