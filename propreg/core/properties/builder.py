"""
Property registry assembly.

The general registry is built from the MDN property data in its declared
order, one canonical property at a time:

  1) skip `--*` and `all` (`all` is seeded up front)
  2) parse the grammar; names = [canonical]; deprecated = MDN status
  3) with compat data:
       - never added by any browser -> the property is dropped completely
       - grammar narrowed by compat keyword sub-features
       - prefixed / alternative names added as current or obsolete names,
         except names that are canonical properties themselves
       - deprecated = compat status
  4) deprecated -> every current name becomes obsolete
  5) types resolved once and shared by every name of the property
  6) each distinct current, then obsolete, name merged into the registry

Because merging keeps the first writer's identity and ANDs obsolescence, the
order above is observable and stays fixed.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from propreg.core.compat import (
    CompatibilityData,
    compat_names,
    compat_syntax,
    get_compat,
    is_added_by_some,
    is_deprecated,
)
from propreg.core.data import PropertyDataStore
from propreg.core.grammar import parse
from propreg.core.settings import Settings
from propreg.core.types import ResolvedType, create_property_data_type_resolver, resolve_data_types, typing

from .merge import WarnSink, filter_missing_properties, is_vendor_property, merge_recurrent
from .models import MissingCompatibilityDataError, PropertyRecord, PropertyRegistries

_log = logging.getLogger("propreg.properties")

ALL = "all"

IGNORES = (
    # Custom properties
    "--*",
    # Seeded manually
    ALL,
)

GLOBAL_KEYWORDS = "global_keywords"


def _distinct(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


def load_globals(store: PropertyDataStore, compat: CompatibilityData) -> Tuple[ResolvedType, ...]:
    """CSS-wide keywords. They are exactly the values of the `all` property."""
    global_data = compat.types_data(GLOBAL_KEYWORDS)
    if not global_data:
        raise MissingCompatibilityDataError(
            "Compatibility data for CSS-wide keywords is missing or may have been moved"
        )

    entity = compat_syntax(global_data, parse(store.property_syntax(ALL)))
    return tuple(resolve_data_types(typing(entity)))


def _seed_properties() -> Dict[str, PropertyRecord]:
    # Empty so that it only receives the CSS-wide keywords
    return {
        ALL: PropertyRecord(
            canonical_name=ALL,
            vendor_prefixed=False,
            shorthand=True,
            obsolete=False,
            types=(),
        ),
    }


def build_html_properties(
    store: PropertyDataStore,
    compat: CompatibilityData,
    *,
    warn: Optional[WarnSink] = None,
) -> Dict[str, PropertyRecord]:
    warn = warn or _log.warning
    registry = _seed_properties()
    dropped = 0

    for original_name, meta in store.properties.items():
        if original_name in IGNORES:
            continue

        entity = parse(meta.syntax)
        current_names: List[str] = [original_name]
        obsolete_names: List[str] = []
        deprecated = is_deprecated(meta)

        property_data: Optional[Mapping[str, Any]] = compat.property_data(original_name)

        if property_data is not None:
            support = get_compat(property_data)

            if not is_added_by_some(support):
                # The property needs to be added by some browser
                _log.debug("Dropping %s: not added by any browser", original_name)
                dropped += 1
                continue

            entity = compat_syntax(property_data, entity)
            current_names += filter_missing_properties(compat_names(support, original_name), store.properties)
            obsolete_names += filter_missing_properties(
                compat_names(support, original_name, only_removed=True), store.properties
            )
            deprecated = is_deprecated(meta, support)

        if deprecated:
            obsolete_names += current_names
            current_names = []

        resolver = create_property_data_type_resolver(store.syntaxes, compat, property_data)
        types = tuple(resolve_data_types(typing(entity), resolver))

        for name in _distinct(current_names):
            registry[name] = merge_recurrent(
                name,
                registry,
                _record(original_name, name, meta.shorthand, obsolete=False, types=types),
                warn=warn,
            )

        for name in _distinct(obsolete_names):
            registry[name] = merge_recurrent(
                name,
                registry,
                _record(original_name, name, meta.shorthand, obsolete=True, types=types),
                warn=warn,
            )

    _log.info("Built %d property names (%d canonical properties dropped)", len(registry), dropped)
    return registry


def _record(
    canonical_name: str,
    name: str,
    shorthand: bool,
    *,
    obsolete: bool,
    types: Tuple[ResolvedType, ...],
) -> PropertyRecord:
    return PropertyRecord(
        canonical_name=canonical_name,
        vendor_prefixed=is_vendor_property(name),
        shorthand=shorthand,
        obsolete=obsolete,
        types=types,
    )


def build_svg_properties(store: PropertyDataStore, compat: CompatibilityData) -> Dict[str, PropertyRecord]:
    registry: Dict[str, PropertyRecord] = {}

    for name, meta in store.svg_properties.items():
        if not meta.syntax:
            _log.debug("Skipping SVG property %s without syntax", name)
            continue

        resolver = create_property_data_type_resolver(store.syntaxes, compat, compat.property_data(name))
        registry[name] = PropertyRecord(
            canonical_name=name,
            vendor_prefixed=False,
            shorthand=False,
            obsolete=False,
            types=tuple(resolve_data_types(typing(parse(meta.syntax)), resolver)),
        )

    _log.info("Built %d SVG properties", len(registry))
    return registry


def build_registries(
    store: PropertyDataStore,
    compat: CompatibilityData,
    *,
    warn: Optional[WarnSink] = None,
) -> PropertyRegistries:
    """Build both registries once. Raises MissingCompatibilityDataError on broken data."""
    global_types = load_globals(store, compat)
    properties = build_html_properties(store, compat, warn=warn)
    svg_properties = build_svg_properties(store, compat)

    return PropertyRegistries(
        properties=MappingProxyType(properties),
        svg_properties=MappingProxyType(svg_properties),
        globals=global_types,
    )


def load_registries(settings: Settings, *, warn: Optional[WarnSink] = None) -> PropertyRegistries:
    store = PropertyDataStore.from_files(
        properties_path=settings.properties_path,
        syntaxes_path=settings.syntaxes_path,
        svg_path=settings.svg_path,
    )
    compat = CompatibilityData.from_file(settings.compat_path)
    return build_registries(store, compat, warn=warn)
