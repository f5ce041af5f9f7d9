from .models import ResolvedType, TypeKind
from .typer import typing, unique_types
from .data_types import DataTypeResolver, create_property_data_type_resolver, resolve_data_types

__all__ = [
    "ResolvedType",
    "TypeKind",
    "typing",
    "unique_types",
    "DataTypeResolver",
    "create_property_data_type_resolver",
    "resolve_data_types",
]
