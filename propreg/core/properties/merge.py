from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, List, Mapping

from .models import PropertyRecord

_log = logging.getLogger("propreg.properties")

WarnSink = Callable[..., None]

_VENDOR_PROPERTY_RE = re.compile(r"^-")


def is_vendor_property(name: str) -> bool:
    return _VENDOR_PROPERTY_RE.match(name) is not None


def filter_missing_properties(names: Iterable[str], properties: Mapping[str, object]) -> List[str]:
    # Names defined as canonical properties are built in their own right.
    return [name for name in names if name not in properties]


def merge_recurrent(
    name: str,
    registry: Mapping[str, PropertyRecord],
    candidate: PropertyRecord,
    warn: WarnSink = _log.warning,
) -> PropertyRecord:
    """Record to store at `name` when `candidate` is written there.

    The first write keeps identity, shorthand and types. A name only stays
    obsolete if every write agrees it is obsolete.
    """
    current = registry.get(name)
    if current is None:
        return candidate

    if current.canonical_name != candidate.canonical_name:
        warn(
            "Property `%s` resolved by `%s` was duplicated by `%s`",
            name,
            current.canonical_name,
            candidate.canonical_name,
        )

    return current.model_copy(
        update={
            "vendor_prefixed": is_vendor_property(name),
            "obsolete": current.obsolete and candidate.obsolete,
        }
    )
