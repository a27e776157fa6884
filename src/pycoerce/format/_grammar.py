"""Lark grammar and compiler for Joda-style date-time patterns."""

from __future__ import annotations

from lark import Lark, Token, Tree
from lark.exceptions import LarkError
from lark.visitors import Interpreter

from pycoerce._constants import DEFAULT_PIVOT_YEAR
from pycoerce._errors import ERR_MSG_INVALID_PATTERN, InvalidPatternError
from pycoerce.format._fields import (
    Element,
    Fraction,
    Literal,
    MonthName,
    Number,
    Offset,
    WeekdayName,
)

_GRAMMAR = r"""
pattern: _item*
_item: field | quoted | literal | unknown

field: FIELD
quoted: QUOTED
literal: LITERAL
unknown: UNKNOWN

FIELD.2: /y+|x+|M+|d+|D+|w+|e+|E+|H+|m+|s+|S+|Z+/
UNKNOWN: /[a-zA-Z]/
QUOTED: /'(?:[^']|'')*'/
LITERAL: /[^a-zA-Z']+/
"""

_parser = Lark(_GRAMMAR, start="pattern", parser="lalr")


class _PatternCompiler(Interpreter):
    """Turns a pattern parse tree into a flat list of elements."""

    def __init__(self, pivot_year: int) -> None:
        self._pivot_year = pivot_year

    def pattern(self, tree: Tree) -> list[Element]:
        elements: list[Element] = []
        for child in tree.children:
            element = self.visit(child)
            # Merge runs like 'T' followed by ':' into one literal
            if (
                isinstance(element, Literal)
                and elements
                and isinstance(elements[-1], Literal)
            ):
                elements[-1] = Literal(elements[-1].text + element.text)
            else:
                elements.append(element)
        return elements

    def field(self, tree: Tree) -> Element:
        token: Token = tree.children[0]
        letter, count = token[0], len(token)
        if letter == "S":
            return Fraction(count)
        if letter == "Z":
            return Offset(count)
        if letter == "E":
            return WeekdayName(count)
        if letter == "M" and count >= 3:
            return MonthName(count)
        return Number(letter, count, pivot_year=self._pivot_year)

    def quoted(self, tree: Tree) -> Literal:
        body = str(tree.children[0])[1:-1]
        if not body:
            return Literal("'")
        return Literal(body.replace("''", "'"))

    def literal(self, tree: Tree) -> Literal:
        return Literal(str(tree.children[0]))

    def unknown(self, tree: Tree) -> Element:
        letter = str(tree.children[0])
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"unsupported pattern letter {letter!r}",
        )


def compile_pattern(
    pattern: str, *, pivot_year: int = DEFAULT_PIVOT_YEAR
) -> list[Element]:
    """Compile a Joda-style pattern into formatter elements.

    Raises:
        InvalidPatternError: If the pattern uses an unsupported letter or
            has an unterminated quote.
    """
    try:
        tree = _parser.parse(pattern)
    except LarkError as e:
        raise InvalidPatternError(
            ERR_MSG_INVALID_PATTERN,
            f"cannot parse pattern {pattern!r}: {e}",
            wrapped=e,
        ) from e
    return _PatternCompiler(pivot_year).visit(tree)
