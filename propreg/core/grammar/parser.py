"""
Value definition syntax parser.

Turns strings such as ``[ <length> | auto ]{1,2} || inset`` into an immutable
entity tree (see ``models``). Combinator precedence follows
https://drafts.csswg.org/css-values-4/#component-combinators: juxtaposition
binds tighter than ``&&``, which binds tighter than ``||``, then ``|``.
"""
from __future__ import annotations

import collections
import dataclasses
import enum
import re
from typing import Iterator, List, Optional

from .models import (
    Combinator,
    DataType,
    Entity,
    Function,
    Group,
    Keyword,
    Literal,
    Multiplier,
    PropertyReference,
)


class GrammarSyntaxError(ValueError):
    pass


class TokenKind(enum.Enum):
    # References. Data type names may carry a range, e.g. <length [0,∞]>.
    PROPERTY_REFERENCE = re.compile(r"<'([-a-zA-Z0-9]+)'>")
    DATA_TYPE = re.compile(r"<([-a-zA-Z0-9]+(?:\(\))?)(?:\s*\[[^\]]*\])?>")
    FUNCTION = re.compile(r"([-a-zA-Z][-a-zA-Z0-9]*)\(")

    # Values.
    STRING = re.compile(r"'([^']*)'")
    NUMBER = re.compile(r"-?\d+(?:\.\d+)?")
    IDENT = re.compile(r"-*[a-zA-Z_][-a-zA-Z0-9_]*")

    # Brackets.
    LSQUARE = re.compile(r"\[")
    RSQUARE = re.compile(r"\]")
    RPAREN = re.compile(r"\)")

    # Combinators.
    OROR = re.compile(r"\|\|")
    OR = re.compile(r"\|")
    ANDAND = re.compile(r"&&")

    # Multipliers.
    HASH = re.compile(r"#")
    PLUS = re.compile(r"\+")
    STAR = re.compile(r"\*")
    QMARK = re.compile(r"\?")
    NOT = re.compile(r"!")
    RANGE = re.compile(r"\{\s*(\d+)\s*(,)?\s*(\d*)\s*\}")

    PUNCTUATION = re.compile(r"[,/:;=]")
    WHITESPACE = re.compile(r"\s+")

    # Sentinel, never matched.
    EOF = re.compile(r"(?!)")


Token = collections.namedtuple("Token", ["kind", "text", "match", "position"])


def tokenize(syntax: str) -> Iterator[Token]:
    position = 0
    while position < len(syntax):
        for kind in TokenKind:
            match = kind.value.match(syntax, position)
            if match:
                position = match.end(0)
                if kind is not TokenKind.WHITESPACE:
                    yield Token(kind, match.group(0), match, match.start(0))
                break
        else:
            raise GrammarSyntaxError(
                f"Illegal character {syntax[position]!r} at {position} in syntax {syntax!r}"
            )
    yield Token(TokenKind.EOF, "", None, len(syntax))


_SEPARATORS = (
    (Combinator.SINGLE_BAR, TokenKind.OR),
    (Combinator.DOUBLE_BAR, TokenKind.OROR),
    (Combinator.DOUBLE_AMPERSAND, TokenKind.ANDAND),
)

_TERMINATORS = {
    TokenKind.OR,
    TokenKind.OROR,
    TokenKind.ANDAND,
    TokenKind.RSQUARE,
    TokenKind.RPAREN,
    TokenKind.EOF,
}

_SIMPLE_MULTIPLIERS = {
    TokenKind.QMARK: Multiplier(0, 1),
    TokenKind.STAR: Multiplier(0, None),
    TokenKind.PLUS: Multiplier(1, None),
}


class GrammarParser:
    def __init__(self, syntax: str):
        self.syntax = syntax
        self._tokens: List[Token] = list(tokenize(syntax))
        self._pos = 0

    def parse(self) -> Group:
        if self._peek().kind is TokenKind.EOF:
            return Group()
        entity = self._parse_combination()
        self._expect(TokenKind.EOF)
        return _as_group(entity)

    # --- internals ---

    def _peek(self) -> Token:
        return self._tokens[self._pos]

    def _advance(self) -> Token:
        token = self._tokens[self._pos]
        if token.kind is not TokenKind.EOF:
            self._pos += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        token = self._advance()
        if token.kind is not kind:
            raise self._unexpected(token, expected=kind)
        return token

    def _unexpected(self, token: Token, expected: Optional[TokenKind] = None) -> GrammarSyntaxError:
        found = token.text or "end of input"
        msg = f"Unexpected {found!r} at {token.position} in syntax {self.syntax!r}"
        if expected is not None:
            msg += f" (expected {expected.name})"
        return GrammarSyntaxError(msg)

    def _parse_combination(self, level: int = 0) -> Entity:
        if level == len(_SEPARATORS):
            return self._parse_juxtaposition()

        combinator, separator = _SEPARATORS[level]
        members = [self._parse_combination(level + 1)]
        while self._peek().kind is separator:
            self._advance()
            members.append(self._parse_combination(level + 1))

        if len(members) == 1:
            return members[0]
        return Group(combinator=combinator, members=tuple(members))

    def _parse_juxtaposition(self) -> Entity:
        members: List[Entity] = []
        while self._peek().kind not in _TERMINATORS:
            members.append(self._parse_term())

        if not members:
            raise self._unexpected(self._peek())
        if len(members) == 1:
            return members[0]
        return Group(combinator=Combinator.JUXTAPOSITION, members=tuple(members))

    def _parse_term(self) -> Entity:
        token = self._advance()
        kind = token.kind

        if kind is TokenKind.LSQUARE:
            inner = self._parse_combination()
            self._expect(TokenKind.RSQUARE)
            inner = _as_group(inner)
            entity: Entity = dataclasses.replace(inner, bracketed=True)
        elif kind is TokenKind.DATA_TYPE:
            entity = DataType(token.match.group(1))
        elif kind is TokenKind.PROPERTY_REFERENCE:
            entity = PropertyReference(token.match.group(1))
        elif kind is TokenKind.FUNCTION:
            if self._peek().kind is TokenKind.RPAREN:
                arguments = Group()
            else:
                arguments = _as_group(self._parse_combination())
            self._expect(TokenKind.RPAREN)
            entity = Function(token.match.group(1), arguments)
        elif kind in (TokenKind.IDENT, TokenKind.NUMBER):
            entity = Keyword(token.text)
        elif kind is TokenKind.STRING:
            entity = Literal(token.match.group(1))
        elif kind is TokenKind.PUNCTUATION:
            entity = Literal(token.text)
        else:
            raise self._unexpected(token)

        multiplier = self._parse_multiplier()
        if multiplier is not None:
            entity = dataclasses.replace(entity, multiplier=multiplier)
        return entity

    def _parse_multiplier(self) -> Optional[Multiplier]:
        kind = self._peek().kind
        multiplier: Optional[Multiplier] = None

        if kind in _SIMPLE_MULTIPLIERS:
            self._advance()
            multiplier = _SIMPLE_MULTIPLIERS[kind]
        elif kind is TokenKind.HASH:
            self._advance()
            if self._peek().kind is TokenKind.RANGE:
                low, high = _range_bounds(self._advance())
                multiplier = Multiplier(low, high, comma_separated=True)
            else:
                multiplier = Multiplier(1, None, comma_separated=True)
        elif kind is TokenKind.RANGE:
            low, high = _range_bounds(self._advance())
            multiplier = Multiplier(low, high)

        # `!` only demands that a group produces at least one value
        if self._peek().kind is TokenKind.NOT:
            self._advance()
        return multiplier


def _range_bounds(token: Token):
    low, comma, high = token.match.groups()
    if comma is None:
        return int(low), int(low)
    if not high:
        return int(low), None
    return int(low), int(high)


def _as_group(entity: Entity) -> Group:
    if isinstance(entity, Group) and not entity.bracketed:
        return entity
    return Group(combinator=Combinator.JUXTAPOSITION, members=(entity,))


def parse(syntax: Optional[str]) -> Group:
    """Parse a value definition syntax. Empty or missing syntax gives an empty group."""
    return GrammarParser(syntax or "").parse()
