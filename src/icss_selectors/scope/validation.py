"""Post-resolution checks over the comma-branches of one rule.

Each check takes the resolved branches plus the rule's original selector
text and raises when the rule must be rejected.
"""

from __future__ import annotations

from typing import Iterable

from icss_selectors.errors import InconsistentSelectorError, NotPureError
from icss_selectors.scope.resolver import ResolvedSelector
from icss_selectors.selector.model import NodeType, Selector

__all__ = ["check_consistent", "check_pure", "has_local"]


def has_local(selector: Selector) -> bool:
    """True if a ``:local(...)`` marker appears anywhere in *selector*."""
    for node in selector.nodes:
        if node.type is not NodeType.NESTED_PSEUDO_CLASS or node.nodes is None:
            continue
        if node.value.lower() == "local":
            return True
        if any(has_local(s) for s in node.nodes):
            return True
    return False


def check_consistent(resolved: Iterable[ResolvedSelector], source: str) -> None:
    """All branches of a rule must end in the same mode."""
    modes = {r.mode for r in resolved}
    if len(modes) > 1:
        raise InconsistentSelectorError(source)


def check_pure(resolved: Iterable[ResolvedSelector], source: str) -> None:
    """Every branch must keep at least one local class or id."""
    for r in resolved:
        if not has_local(r.selector):
            raise NotPureError(source)
