from __future__ import annotations

from typing import Any, Mapping

from icss_selectors.config import ScopeConfig
from icss_selectors.css.parser import parse_css
from icss_selectors.css.stringify import stringify_css
from icss_selectors.transforms.localize import LocalizeSelectorsTransform, localize_selector

__all__ = ["LocalizeSelectorsTransform", "localize_css", "localize_selector"]


def localize_css(source: str, options: ScopeConfig | Mapping[str, Any] | None = None) -> str:
    """Parse *source*, localize every eligible rule and return the new CSS text."""
    config = options if isinstance(options, ScopeConfig) else ScopeConfig.from_mapping(options)
    root = LocalizeSelectorsTransform(config).apply(parse_css(source))
    return stringify_css(root)
