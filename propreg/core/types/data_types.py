from __future__ import annotations

import functools
import logging
from typing import Any, Callable, FrozenSet, Iterable, List, Mapping, Optional

from propreg.core.compat import CompatibilityData, compat_syntax
from propreg.core.grammar import Group, GrammarSyntaxError, parse

from .models import ResolvedType, TypeKind
from .typer import typing, unique_types

_log = logging.getLogger("propreg.types")

# Returns the (unresolved) types of a named data type, or None when unknown.
DataTypeResolver = Callable[[str], Optional[List[ResolvedType]]]


def resolve_data_types(
    types: Iterable[ResolvedType],
    resolver: Optional[DataTypeResolver] = None,
    _resolving: FrozenSet[str] = frozenset(),
) -> List[ResolvedType]:
    """Expand data type references in place through `resolver`.

    Names the resolver does not know, and names already being expanded
    further up (recursive definitions), stay as data type references.
    """
    resolved: List[ResolvedType] = []
    for t in types:
        if t.kind is TypeKind.DATA_TYPE and resolver is not None and t.value not in _resolving:
            nested = resolver(t.value)
            if nested is not None:
                resolved.extend(resolve_data_types(nested, resolver, _resolving | {t.value}))
                continue
        resolved.append(t)
    return unique_types(resolved)


@functools.lru_cache(maxsize=1024)
def _parse_syntax(syntax: str) -> Group:
    return parse(syntax)


def create_property_data_type_resolver(
    syntaxes: Mapping[str, str],
    compat: CompatibilityData,
    property_data: Optional[Mapping[str, Any]] = None,
) -> DataTypeResolver:
    """Resolver for the data types nested in one property's grammar.

    Each data type grammar is narrowed by the data type's own compat data and
    then by the property's, since keyword sub-features of a property (e.g.
    `display.flex`) are spelled inside its data types.
    """

    def resolver(name: str) -> Optional[List[ResolvedType]]:
        syntax = syntaxes.get(name)
        if not syntax:
            return None
        try:
            entity = _parse_syntax(syntax)
        except GrammarSyntaxError as exc:
            _log.warning("Keeping data type <%s> unresolved: %s", name, exc)
            return None

        types_data = compat.types_data(name)
        if types_data is not None:
            entity = compat_syntax(types_data, entity)
        if property_data is not None:
            entity = compat_syntax(property_data, entity)
        return typing(entity)

    return resolver
