from .models import DataSourceError, PropertyMeta, SvgPropertyMeta
from .store import PropertyDataStore, read_document

__all__ = [
    "DataSourceError",
    "PropertyMeta",
    "SvgPropertyMeta",
    "PropertyDataStore",
    "read_document",
]
