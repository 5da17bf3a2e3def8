"""Scope context: the active mode and the override that produced it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from icss_selectors.config import Mode
from icss_selectors.errors import NestedScopeError


class OverrideKind(Enum):
    """How an explicit :local/:global was written."""

    NARROW = "narrow"  # :local(...) / :global(...)
    BROAD = "broad"  # :local / :global


@dataclass(frozen=True)
class ScopeContext:
    """Immutable scope state threaded through the resolver.

    ``enter`` derives a child context, ``leave`` returns the parent. Nothing
    may be entered while a narrow override is active.
    """

    default_mode: Mode
    override: Mode | None = None
    override_kind: OverrideKind | None = None
    parent: ScopeContext | None = None

    @property
    def mode(self) -> Mode:
        if self.override is not None:
            return self.override
        return self.default_mode

    def current(self) -> Mode:
        return self.mode

    def enter(self, mode: Mode, kind: OverrideKind) -> ScopeContext:
        if self.override_kind is OverrideKind.NARROW:
            construct = f":{mode.value}"
            if kind is OverrideKind.NARROW:
                construct += "(...)"
            raise NestedScopeError(
                f"A {construct} is not allowed inside of a "
                f":{self.override.value}(...)"  # type: ignore[union-attr]
            )
        return ScopeContext(
            default_mode=self.default_mode,
            override=mode,
            override_kind=kind,
            parent=self,
        )

    def leave(self) -> ScopeContext:
        if self.parent is None:
            raise ValueError("Cannot leave the root scope context")
        return self.parent
