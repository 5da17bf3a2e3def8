from icss_selectors.css.model import AtRule, Comment, Declaration, Root, Rule, walk_rules
from icss_selectors.css.parser import parse_css
from icss_selectors.css.stringify import stringify_css

__all__ = [
    "AtRule",
    "Comment",
    "Declaration",
    "Root",
    "Rule",
    "parse_css",
    "stringify_css",
    "walk_rules",
]
