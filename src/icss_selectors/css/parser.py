"""Hand-written scanner for CSS documents.

Only the block structure is parsed: statements are split on ``{``, ``;``
and ``}`` outside of strings, comments and parentheses. Selector text,
at-rule params and declaration values are kept verbatim.
"""

from __future__ import annotations

import re

from icss_selectors.css.model import AtRule, Comment, CssNode, Declaration, Root, Rule
from icss_selectors.errors import CssSyntaxError

__all__ = ["parse_css"]

# Whitespace between statements; stray semicolons are kept with it.
_SPACE_RE = re.compile(r"[\s;]*")

_AT_NAME_RE = re.compile(r"@(?P<name>[-\w]+)")

_STRING_RE = re.compile(
    r"""
    "(?:[^"\\]|\\.)*"      # double-quoted
    |
    '(?:[^'\\]|\\.)*'      # single-quoted
    """,
    re.VERBOSE | re.DOTALL,
)

# prop : value, whitespace around the colon kept in "between"
_DECL_RE = re.compile(
    r"(?P<prop>[^:\s]+)(?P<between>\s*:\s*)(?P<value>.*)",
    re.DOTALL,
)

_LEADING_WS_RE = re.compile(r"^\s*")
_TRAILING_WS_RE = re.compile(r"\s*$")


def _split_ws(text: str) -> tuple[str, str, str]:
    """Split *text* into (leading whitespace, body, trailing whitespace)."""
    leading = _LEADING_WS_RE.match(text).group()  # type: ignore[union-attr]
    body = text[len(leading):]
    trailing = _TRAILING_WS_RE.search(body).group()  # type: ignore[union-attr]
    return leading, body[: len(body) - len(trailing)], trailing


class _Scanner:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _error(self, message: str, pos: int | None = None) -> CssSyntaxError:
        pos = self.pos if pos is None else pos
        line = self.source.count("\n", 0, pos) + 1
        column = pos - (self.source.rfind("\n", 0, pos) + 1) + 1
        return CssSyntaxError(f"{message} at {line}:{column}", line=line, column=column)

    def _peek(self) -> str:
        return self.source[self.pos] if self.pos < len(self.source) else ""

    def parse(self) -> Root:
        nodes, after = self._block(top_level=True)
        return Root(nodes=nodes, after=after)

    def _block(self, top_level: bool) -> tuple[list[CssNode], str]:
        start = self.pos
        nodes: list[CssNode] = []
        while True:
            space = _SPACE_RE.match(self.source, self.pos).group()  # type: ignore[union-attr]
            self.pos += len(space)
            char = self._peek()
            if not char:
                if not top_level:
                    raise self._error("Unclosed block", start - 1)
                return nodes, space
            if char == "}":
                if top_level:
                    raise self._error("Unexpected }")
                self.pos += 1
                return nodes, space
            if self.source.startswith("/*", self.pos):
                nodes.append(self._comment(space))
            elif char == "@":
                nodes.append(self._at_rule(space))
            else:
                nodes.append(self._statement(space))

    def _comment(self, before: str) -> Comment:
        end = self.source.find("*/", self.pos + 2)
        if end == -1:
            raise self._error("Unclosed comment")
        text = self.source[self.pos + 2 : end]
        self.pos = end + 2
        return Comment(text=text, before=before)

    def _prelude(self) -> str:
        """Consume text up to an unnested ``{``, ``;`` or ``}``."""
        src = self.source
        start = self.pos
        depth = 0
        while self.pos < len(src):
            char = src[self.pos]
            if char in "\"'":
                match = _STRING_RE.match(src, self.pos)
                if match is None:
                    raise self._error("Unclosed string")
                self.pos = match.end()
                continue
            if src.startswith("/*", self.pos):
                end = src.find("*/", self.pos + 2)
                if end == -1:
                    raise self._error("Unclosed comment")
                self.pos = end + 2
                continue
            if char == "\\":
                self.pos += 2
                continue
            if char in "([":
                depth += 1
            elif char in ")]":
                depth = max(depth - 1, 0)
            elif depth == 0 and char in "{;}":
                break
            self.pos += 1
        return src[start : self.pos]

    def _at_rule(self, before: str) -> AtRule:
        match = _AT_NAME_RE.match(self.source, self.pos)
        if match is None:
            raise self._error("At-rule without name")
        self.pos = match.end()
        after_name, params, between = _split_ws(self._prelude())
        rule = AtRule(
            name=match.group("name"),
            params=params,
            before=before,
            after_name=after_name,
            between=between,
        )
        terminator = self._peek()
        if terminator == "{":
            self.pos += 1
            rule.nodes, rule.after = self._block(top_level=False)
        elif terminator == ";":
            self.pos += 1
        else:
            rule.semicolon = ""
        return rule

    def _statement(self, before: str) -> CssNode:
        start = self.pos
        text = self._prelude()
        terminator = self._peek()
        if terminator == "{":
            self.pos += 1
            _, selector, between = _split_ws(text)
            nodes, after = self._block(top_level=False)
            return Rule(
                selector=selector, nodes=nodes, before=before, between=between, after=after
            )

        match = _DECL_RE.match(text)
        if match is None:
            raise self._error(f"Unknown word {text.strip()!r}", start)
        semicolon = ""
        if terminator == ";":
            self.pos += 1
            semicolon = ";"
        return Declaration(
            prop=match.group("prop"),
            value=match.group("value"),
            before=before,
            between=match.group("between"),
            semicolon=semicolon,
        )


def parse_css(source: str) -> Root:
    """Parse *source* into a Root whose stringification equals *source*."""
    return _Scanner(source).parse()
