from __future__ import annotations

import dataclasses
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from propreg.core.data import PropertyMeta
from propreg.core.grammar import Combinator, Entity, Function, Group, Keyword

from .models import CompatStatement

_log = logging.getLogger("propreg.compat")

Feature = Mapping[str, Any]


def get_compat(feature: Feature) -> CompatStatement:
    return CompatStatement.model_validate(feature.get("__compat") or {})


def subfeatures(feature: Feature) -> Dict[str, Feature]:
    return {
        name: value
        for name, value in feature.items()
        if not name.startswith("__") and isinstance(value, dict) and "__compat" in value
    }


def is_added_by_some(compat: CompatStatement) -> bool:
    return any(statement.added for statement in compat.statements())


def compat_names(compat: CompatStatement, name: str, only_removed: bool = False) -> List[str]:
    """Prefixed and alternative names the feature ships under.

    With `only_removed` the names that were dropped again, otherwise the ones
    still supported. Order follows the data; duplicates are kept.
    """
    names: List[str] = []
    for statement in compat.statements():
        if not statement.added or statement.removed != only_removed:
            continue
        if statement.prefix:
            names.append(statement.prefix + name)
        elif statement.alternative_name:
            names.append(statement.alternative_name)
    return names


def is_deprecated(meta: PropertyMeta, compat: Optional[CompatStatement] = None) -> bool:
    # Compat data, when given, is authoritative over the MDN status.
    if compat is not None:
        return bool(compat.status and compat.status.deprecated)
    return meta.obsolete


def compat_syntax(feature: Feature, entity: Group) -> Group:
    """Rewrite keyword alternatives according to the feature's keyword sub-features.

    Keywords no browser ever shipped are dropped; keywords shipped under other
    names get those names added as further alternatives.
    """
    keywords = subfeatures(feature)
    if not keywords:
        return entity
    return _rewrite(entity, keywords)


def _rewrite(entity: Entity, keywords: Dict[str, Feature]) -> Any:
    if isinstance(entity, Function):
        return dataclasses.replace(entity, arguments=_rewrite(entity.arguments, keywords))

    if not isinstance(entity, Group):
        return entity

    members = tuple(_rewrite(member, keywords) for member in entity.members)
    if entity.combinator is Combinator.SINGLE_BAR:
        members = _rewrite_alternatives(members, keywords)
    return dataclasses.replace(entity, members=members)


def _rewrite_alternatives(members: Tuple[Entity, ...], keywords: Dict[str, Feature]) -> Tuple[Entity, ...]:
    present = {m.name for m in members if isinstance(m, Keyword)}
    out: List[Entity] = []

    for member in members:
        if not isinstance(member, Keyword) or member.multiplier is not None or member.name not in keywords:
            out.append(member)
            continue

        compat = get_compat(keywords[member.name])
        if not is_added_by_some(compat):
            _log.debug("Dropping keyword %r: not added by any browser", member.name)
            continue

        out.append(member)
        for alias in compat_names(compat, member.name):
            if alias not in present:
                present.add(alias)
                out.append(Keyword(alias))

    return tuple(out)
