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
from .parser import GrammarParser, GrammarSyntaxError, parse

__all__ = [
    "Combinator",
    "DataType",
    "Entity",
    "Function",
    "Group",
    "Keyword",
    "Literal",
    "Multiplier",
    "PropertyReference",
    "GrammarParser",
    "GrammarSyntaxError",
    "parse",
]
