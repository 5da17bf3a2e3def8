"""Scope resolver: rewrite a selector so local classes and ids are marked.

Walks each comma-branch left to right with an immutable ScopeContext:

- ``:local`` / ``:global`` (broad) switch the mode for the rest of the
  branch and are dropped from the output.
- ``:local(...)`` / ``:global(...)`` (narrow) resolve their argument under
  the named mode and are replaced by the rewritten argument.
- Other functional pseudos (``:not(...)`` etc.) resolve their argument under
  the current context; a broad override inside them does not leak out.
- Classes and ids resolved as local are wrapped in ``:local(...)``; every
  other node passes through.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from icss_selectors.config import Mode
from icss_selectors.errors import ScopeError, SpacingError
from icss_selectors.scope.classifier import (
    Kind,
    classify,
    is_scopable,
    override_mode,
)
from icss_selectors.scope.context import OverrideKind, ScopeContext
from icss_selectors.selector.model import (
    NodeType,
    Selector,
    SelectorList,
    SelectorNode,
    local_marker,
)

__all__ = ["ResolvedSelector", "resolve_selector", "resolve_selector_list"]

_SEPARATORS = (Kind.SPACING, Kind.COMBINATOR)


@dataclass(frozen=True)
class ResolvedSelector:
    """A rewritten comma-branch and the mode in force at its end."""

    selector: Selector
    mode: Mode


def resolve_selector(selector: Selector, default_mode: Mode) -> ResolvedSelector:
    """Resolve one comma-branch starting from *default_mode*."""
    nodes, context = _resolve_nodes(selector.nodes, ScopeContext(default_mode))
    if selector.nodes and not nodes:
        raise ScopeError("Empty selector after removing :local/:global overrides")
    return ResolvedSelector(
        selector=replace(selector, nodes=nodes),
        mode=context.mode,
    )


def resolve_selector_list(
    selector_list: SelectorList, default_mode: Mode
) -> list[ResolvedSelector]:
    """Resolve every comma-branch independently, in document order."""
    return [resolve_selector(s, default_mode) for s in selector_list]


def _resolve_nested(selector_list: SelectorList, context: ScopeContext) -> SelectorList:
    selectors = []
    for selector in selector_list:
        nodes, _ = _resolve_nodes(selector.nodes, context)
        selectors.append(replace(selector, nodes=nodes))
    return SelectorList(tuple(selectors))


def _resolve_nodes(
    nodes: tuple[SelectorNode, ...], context: ScopeContext
) -> tuple[tuple[SelectorNode, ...], ScopeContext]:
    out: list[SelectorNode] = []
    skip_spacing = False
    for index, node in enumerate(nodes):
        kind = classify(node)

        if skip_spacing:
            skip_spacing = False
            if kind is Kind.SPACING:
                continue

        if kind is Kind.BROAD_SCOPE:
            context = context.enter(override_mode(node), OverrideKind.BROAD)
            skip_spacing = _check_spacing(nodes, index)
            # the combinator carries its own whitespace
            if (
                out
                and out[-1].type is NodeType.SPACING
                and _next_is_combinator(nodes, index)
            ):
                out.pop()

        elif kind is Kind.NARROW_SCOPE:
            inner = context.enter(override_mode(node), OverrideKind.NARROW)
            out.extend(_resolve_narrow(node, inner))

        elif kind is Kind.FUNCTIONAL_PSEUDO:
            assert node.nodes is not None
            out.append(replace(node, nodes=_resolve_nested(node.nodes, context)))

        elif is_scopable(kind) and context.mode is Mode.LOCAL:
            out.append(local_marker(node))

        else:
            out.append(node)

    return _trim(out), context


def _resolve_narrow(
    node: SelectorNode, context: ScopeContext
) -> tuple[SelectorNode, ...]:
    argument = node.nodes
    if argument is None or len(argument) != 1:
        raise ScopeError(f"A :{node.value}(...) must contain exactly one selector")
    nodes, _ = _resolve_nodes(argument.selectors[0].nodes, context)
    return nodes


def _next_is_combinator(nodes: tuple[SelectorNode, ...], index: int) -> bool:
    return index + 1 < len(nodes) and classify(nodes[index + 1]) is Kind.COMBINATOR


def _check_spacing(nodes: tuple[SelectorNode, ...], index: int) -> bool:
    """Validate whitespace around the broad override at *index*.

    Returns True when the whitespace following it should be dropped.
    """
    name = f":{nodes[index].value}"
    prev_kind = classify(nodes[index - 1]) if index > 0 else None
    next_kind = classify(nodes[index + 1]) if index + 1 < len(nodes) else None

    if prev_kind is None or prev_kind in _SEPARATORS:
        if next_kind is not None and next_kind not in _SEPARATORS:
            raise SpacingError(f"Missing whitespace after {name}")
        return next_kind is Kind.SPACING

    if next_kind in _SEPARATORS:
        raise SpacingError(f"Missing whitespace before {name}")
    return False


def _trim(nodes: list[SelectorNode]) -> tuple[SelectorNode, ...]:
    start = 0
    end = len(nodes)
    while start < end and nodes[start].type is NodeType.SPACING:
        start += 1
    while end > start and nodes[end - 1].type is NodeType.SPACING:
        end -= 1
    return tuple(nodes[start:end])
