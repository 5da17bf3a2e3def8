"""Scope CSS Modules selectors: wrap local classes and ids in ``:local(...)``."""

__version__ = "0.1.0"

from icss_selectors.config import Mode, ScopeConfig, ScopeMode  # noqa: E402
from icss_selectors.errors import (  # noqa: E402
    ConfigurationError,
    CssSyntaxError,
    IcssSelectorsError,
    InconsistentSelectorError,
    NestedScopeError,
    NotPureError,
    ParseError,
    ScopeError,
    SelectorParseError,
    SpacingError,
)
from icss_selectors.transforms import (  # noqa: E402
    LocalizeSelectorsTransform,
    localize_css,
    localize_selector,
)

__all__ = [
    "ConfigurationError",
    "CssSyntaxError",
    "IcssSelectorsError",
    "InconsistentSelectorError",
    "LocalizeSelectorsTransform",
    "Mode",
    "NestedScopeError",
    "NotPureError",
    "ParseError",
    "ScopeConfig",
    "ScopeError",
    "ScopeMode",
    "SelectorParseError",
    "SpacingError",
    "localize_css",
    "localize_selector",
]
