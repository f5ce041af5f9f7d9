from .models import MissingCompatibilityDataError, PropertyRecord, PropertyRegistries
from .merge import filter_missing_properties, is_vendor_property, merge_recurrent
from .builder import (
    ALL,
    IGNORES,
    build_html_properties,
    build_registries,
    build_svg_properties,
    load_globals,
    load_registries,
)

__all__ = [
    "MissingCompatibilityDataError",
    "PropertyRecord",
    "PropertyRegistries",
    "filter_missing_properties",
    "is_vendor_property",
    "merge_recurrent",
    "ALL",
    "IGNORES",
    "build_html_properties",
    "build_registries",
    "build_svg_properties",
    "load_globals",
    "load_registries",
]
