from icss_selectors.selector.model import NodeType, Selector, SelectorList, SelectorNode
from icss_selectors.selector.parser import parse_selector_list
from icss_selectors.selector.stringify import stringify

__all__ = [
    "NodeType",
    "Selector",
    "SelectorList",
    "SelectorNode",
    "parse_selector_list",
    "stringify",
]
