"""
Maps a parsed grammar to the kinds of values it accepts.

Alternatives (``|``) keep the types of each branch. Anything that needs more
than one component to form a value (juxtaposition, ``&&``, repeating
multipliers, functions) can only be described as free text, so it adds
``STRING``. Components that are also valid alone keep their own types next to
that ``STRING``.
"""
from __future__ import annotations

from typing import Iterable, List

from propreg.core.grammar import (
    Combinator,
    DataType,
    Entity,
    Function,
    Group,
    Keyword,
    Literal,
    PropertyReference,
)

from .models import (
    LENGTH,
    NUMBER,
    STRING,
    TIME,
    ResolvedType,
    data_type,
    numeric_literal,
    property_reference,
    string_literal,
)

BASIC_DATA_TYPES = {
    "length": LENGTH,
    "time": TIME,
    "number": NUMBER,
    "integer": NUMBER,
    "string": STRING,
}


def typing(entity: Entity) -> List[ResolvedType]:
    return unique_types(_types_of(entity))


def unique_types(types: Iterable[ResolvedType]) -> List[ResolvedType]:
    return list(dict.fromkeys(types))


def _types_of(entity: Entity) -> List[ResolvedType]:
    own = _own_types(entity)
    multiplier = entity.multiplier
    if multiplier is None or not multiplier.repeats:
        return own
    if multiplier.min_count <= 1:
        return own + [STRING]
    return [STRING]


def _own_types(entity: Entity) -> List[ResolvedType]:
    if isinstance(entity, Keyword):
        if entity.numeric:
            return [numeric_literal(entity.name)]
        return [string_literal(entity.name)]

    if isinstance(entity, DataType):
        basic = BASIC_DATA_TYPES.get(entity.name)
        return [basic] if basic is not None else [data_type(entity.name)]

    if isinstance(entity, PropertyReference):
        return [property_reference(entity.name)]

    if isinstance(entity, Literal):
        return [string_literal(entity.value)]

    if isinstance(entity, Function):
        return [STRING]

    return _group_types(entity)


def _group_types(group: Group) -> List[ResolvedType]:
    members = group.members
    if not members:
        return []
    if len(members) == 1:
        return _types_of(members[0])

    if group.combinator is Combinator.SINGLE_BAR:
        return [t for member in members for t in _types_of(member)]

    if group.combinator is Combinator.DOUBLE_BAR:
        return [t for member in members for t in _types_of(member)] + [STRING]

    # Juxtaposition and `&&` need every required member
    required = [m for m in members if not _optional(m)]
    if len(required) == 1:
        return _types_of(required[0]) + [STRING]
    if not required:
        return [t for member in members for t in _types_of(member)] + [STRING]
    return [STRING]


def _optional(entity: Entity) -> bool:
    return entity.multiplier is not None and entity.multiplier.optional
