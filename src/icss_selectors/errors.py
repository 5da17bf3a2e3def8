"""Error types raised while scoping selectors."""

from __future__ import annotations


class IcssSelectorsError(Exception):
    """Base class for every error raised by icss_selectors."""


class ConfigurationError(IcssSelectorsError):
    """Raised when the transform is configured with an unknown mode."""


class ParseError(IcssSelectorsError):
    """Raised when selector or CSS source cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class SelectorParseError(ParseError):
    """Raised when a selector list cannot be tokenized."""


class CssSyntaxError(ParseError):
    """Raised when a CSS document has unbalanced blocks."""


class ScopeError(IcssSelectorsError):
    """Raised when :local/:global overrides are used in an illegal way.

    ``selector`` is the text of the rule being localized, once known.
    """

    def __init__(self, message: str, selector: str | None = None):
        self.selector = selector
        super().__init__(message)

    def in_rule(self, selector: str) -> ScopeError:
        """Copy of this error naming the rule it was raised for."""
        return type(self)(f'{self} in rule "{selector}"', selector=selector)


class SpacingError(ScopeError):
    """Raised when a broad :local/:global lacks the required whitespace."""


class NestedScopeError(ScopeError):
    """Raised when an override appears inside a :local(...)/:global(...)."""


class RuleError(IcssSelectorsError):
    """Base for errors about a whole rule; carries its selector text."""

    def __init__(self, message: str, selector: str):
        self.selector = selector
        super().__init__(message)


class InconsistentSelectorError(RuleError):
    """Raised when the comma-branches of one rule end in different modes."""

    def __init__(self, selector: str):
        super().__init__(
            f'Inconsistent rule global/local result in rule "{selector}" '
            "(multiple selectors must result in the same mode for the rule)",
            selector,
        )


class NotPureError(RuleError):
    """Raised in pure mode when a branch contains no local class or id."""

    def __init__(self, selector: str):
        super().__init__(
            f'Selector "{selector}" is not pure '
            "(pure selectors must contain at least one local class or id)",
            selector,
        )
