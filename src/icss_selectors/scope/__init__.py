from icss_selectors.scope.classifier import Kind, classify, is_scopable
from icss_selectors.scope.context import OverrideKind, ScopeContext
from icss_selectors.scope.resolver import (
    ResolvedSelector,
    resolve_selector,
    resolve_selector_list,
)
from icss_selectors.scope.validation import check_consistent, check_pure, has_local

__all__ = [
    "Kind",
    "OverrideKind",
    "ResolvedSelector",
    "ScopeContext",
    "check_consistent",
    "check_pure",
    "classify",
    "has_local",
    "is_scopable",
    "resolve_selector",
    "resolve_selector_list",
]
