"""Tests for ScopeContext push/pop and nesting rules."""

import pytest

from icss_selectors.config import Mode
from icss_selectors.errors import NestedScopeError
from icss_selectors.scope import OverrideKind, ScopeContext


class TestScopeContext:
    def test_root_uses_default_mode(self):
        ctx = ScopeContext(Mode.LOCAL)
        assert ctx.current() is Mode.LOCAL
        assert ctx.override_kind is None

    def test_enter_overrides_mode(self):
        ctx = ScopeContext(Mode.LOCAL).enter(Mode.GLOBAL, OverrideKind.NARROW)
        assert ctx.current() is Mode.GLOBAL
        assert ctx.default_mode is Mode.LOCAL

    def test_leave_returns_parent(self):
        root = ScopeContext(Mode.GLOBAL)
        child = root.enter(Mode.LOCAL, OverrideKind.BROAD)
        assert child.leave() is root
        assert child.leave().current() is Mode.GLOBAL

    def test_leave_root_fails(self):
        with pytest.raises(ValueError):
            ScopeContext(Mode.LOCAL).leave()

    def test_broad_after_broad_is_allowed(self):
        ctx = ScopeContext(Mode.LOCAL).enter(Mode.GLOBAL, OverrideKind.BROAD)
        ctx = ctx.enter(Mode.LOCAL, OverrideKind.BROAD)
        assert ctx.current() is Mode.LOCAL

    def test_narrow_after_broad_is_allowed(self):
        ctx = ScopeContext(Mode.LOCAL).enter(Mode.GLOBAL, OverrideKind.BROAD)
        ctx = ctx.enter(Mode.LOCAL, OverrideKind.NARROW)
        assert ctx.current() is Mode.LOCAL


class TestNestedInsideNarrow:
    @pytest.mark.parametrize(
        "outer, inner, kind, message",
        [
            (Mode.LOCAL, Mode.LOCAL, OverrideKind.NARROW, "A :local(...) is not allowed inside of a :local(...)"),
            (Mode.GLOBAL, Mode.GLOBAL, OverrideKind.NARROW, "A :global(...) is not allowed inside of a :global(...)"),
            (Mode.LOCAL, Mode.GLOBAL, OverrideKind.NARROW, "A :global(...) is not allowed inside of a :local(...)"),
            (Mode.GLOBAL, Mode.LOCAL, OverrideKind.BROAD, "A :local is not allowed inside of a :global(...)"),
        ],
    )
    def test_any_override_inside_narrow_fails(self, outer, inner, kind, message):
        ctx = ScopeContext(Mode.LOCAL).enter(outer, OverrideKind.NARROW)
        with pytest.raises(NestedScopeError) as excinfo:
            ctx.enter(inner, kind)
        assert str(excinfo.value) == message
