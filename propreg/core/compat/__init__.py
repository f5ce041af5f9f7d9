from .models import CompatStatement, CompatStatus, SupportStatement
from .features import (
    compat_names,
    compat_syntax,
    get_compat,
    is_added_by_some,
    is_deprecated,
    subfeatures,
)
from .store import CompatibilityData

__all__ = [
    "CompatStatement",
    "CompatStatus",
    "SupportStatement",
    "CompatibilityData",
    "compat_names",
    "compat_syntax",
    "get_compat",
    "is_added_by_some",
    "is_deprecated",
    "subfeatures",
]
