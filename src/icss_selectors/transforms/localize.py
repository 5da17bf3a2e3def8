"""Selector localization transform: scope classes and ids in every rule."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from icss_selectors.config import ScopeConfig
from icss_selectors.css.model import AtRule, CssNode, Root, Rule
from icss_selectors.errors import ScopeError
from icss_selectors.scope.resolver import resolve_selector_list
from icss_selectors.scope.validation import check_consistent, check_pure
from icss_selectors.selector.model import SelectorList
from icss_selectors.selector.parser import parse_selector_list
from icss_selectors.selector.stringify import stringify

logger = logging.getLogger(__name__)

# Pseudo-rules holding the ICSS import/export tables.
_ICSS_RULE_RE = re.compile(r"^(?::export|:import\(.+\))$", re.DOTALL)

_KEYFRAMES_RE = re.compile(r"keyframes$", re.IGNORECASE)


def localize_selector(selector: str, config: ScopeConfig) -> str:
    """Rewrite one rule's selector text, wrapping local classes/ids in ``:local(...)``.

    Raises a ScopeError for misplaced overrides, InconsistentSelectorError
    when the comma-branches end in different modes, and NotPureError in pure
    mode when a branch keeps no local class or id.
    """
    try:
        resolved = resolve_selector_list(
            parse_selector_list(selector), config.default_mode
        )
    except ScopeError as exc:
        raise exc.in_rule(selector) from exc
    check_consistent(resolved, selector)
    if config.pure:
        check_pure(resolved, selector)
    return stringify(SelectorList(tuple(r.selector for r in resolved)))


class LocalizeSelectorsTransform:
    """Rewrite the selectors of every eligible rule in a document.

    Skipped, and emitted unchanged:
        - everything inside ``@keyframes`` (offsets, not selectors),
        - ``:export`` and ``:import(...)`` rules,
        - rules without a body.

    The input tree is not modified; a new Root is returned. The first error
    aborts the whole document.
    """

    def __init__(self, config: ScopeConfig | None = None) -> None:
        self.config = config or ScopeConfig()

    def apply(self, root: Root) -> Root:
        nodes = self._apply_nodes(root.nodes)
        logger.info(
            "Localized selectors in %d top-level node(s) (mode=%s)",
            len(nodes),
            self.config.mode,
        )
        return replace(root, nodes=nodes)

    def _apply_nodes(self, nodes: list[CssNode]) -> list[CssNode]:
        return [self._apply_node(n) for n in nodes]

    def _apply_node(self, node: CssNode) -> CssNode:
        if isinstance(node, AtRule):
            if node.nodes is None or _KEYFRAMES_RE.search(node.name):
                return node
            return replace(node, nodes=self._apply_nodes(node.nodes))
        if isinstance(node, Rule):
            return self._apply_rule(node)
        return node

    def _apply_rule(self, rule: Rule) -> Rule:
        if rule.nodes is None:
            logger.debug("Skipping rule without body: %s", rule.selector)
            return rule
        if _ICSS_RULE_RE.match(rule.selector):
            logger.debug("Skipping ICSS rule: %s", rule.selector)
            return rule
        selector = localize_selector(rule.selector, self.config)
        if selector != rule.selector:
            logger.debug("Rewrote %r -> %r", rule.selector, selector)
        return replace(rule, selector=selector, nodes=self._apply_nodes(rule.nodes))
