"""Transform configuration: the scoping mode and its validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from icss_selectors.errors import ConfigurationError


class Mode(Enum):
    """Scope a simple selector resolves to."""

    GLOBAL = "global"
    LOCAL = "local"


class ScopeMode(Enum):
    """Configured behaviour of the transform.

    ``PURE`` resolves exactly like ``LOCAL`` and additionally rejects any
    selector that ends up without a local class or id.
    """

    GLOBAL = "global"
    LOCAL = "local"
    PURE = "pure"


_VALID_MODES = frozenset(m.value for m in ScopeMode)


@dataclass(frozen=True)
class ScopeConfig:
    mode: str = "local"

    def __post_init__(self) -> None:
        if isinstance(self.mode, ScopeMode):
            object.__setattr__(self, "mode", self.mode.value)
        if self.mode not in _VALID_MODES:
            raise ConfigurationError(
                'options.mode must be either "global", "local" or "pure" '
                '(default "local")'
            )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> ScopeConfig:
        """Build a config from a plain options dict (missing keys use defaults)."""
        if not options:
            return cls()
        return cls(mode=options.get("mode") or "local")

    @property
    def scope_mode(self) -> ScopeMode:
        return ScopeMode(self.mode)

    @property
    def default_mode(self) -> Mode:
        """Mode each comma-branch starts in."""
        if self.scope_mode is ScopeMode.GLOBAL:
            return Mode.GLOBAL
        return Mode.LOCAL

    @property
    def pure(self) -> bool:
        return self.scope_mode is ScopeMode.PURE
